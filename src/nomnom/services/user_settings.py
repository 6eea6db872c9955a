"""User settings service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nomnom.domain.errors import InvalidTimezoneError


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        """Create or update the user's timezone."""


@dataclass
class UserSettingsService:
    """Service for per-user settings used to resolve calendar days."""

    repository: UserSettingsRepository
    default_timezone: str = "UTC"

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user timezone or the configured default if unset."""
        return self.repository.get_timezone(user_id) or self.default_timezone

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        """Validate and persist a user's timezone."""
        if not _is_valid_timezone(timezone):
            raise InvalidTimezoneError(timezone)
        self.repository.set_timezone(user_id, timezone)


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
