"""ASGI entrypoint for the NomNom API."""

from nomnom.api.app import create_app
from nomnom.containers import build_container

app = create_app(build_container())
