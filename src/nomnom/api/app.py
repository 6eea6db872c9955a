"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nomnom.api.users import router as users_router
from nomnom.app_logging import configure_logging
from nomnom.containers import AppContainer
from nomnom.domain.errors import NomNomError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(users_router)

    @app.exception_handler(NomNomError)
    async def handle_domain_error(request: Request, exc: NomNomError) -> JSONResponse:
        logger.info(
            "Request rejected: %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
