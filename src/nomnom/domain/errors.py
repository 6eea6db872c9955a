"""Domain errors surfaced to callers."""


class NomNomError(Exception):
    """Base class for user-facing errors."""


class NoGoalsConfiguredError(NomNomError):
    """Raised when progress is requested before any goal is set."""

    def __init__(self) -> None:
        super().__init__("No goals set. Set goals first with PUT /users/{id}/goals.")


class InvalidToleranceError(NomNomError):
    """Raised when a tolerance falls outside 0-100."""

    def __init__(self, key: str, tolerance: float):
        self.key = key
        self.tolerance = tolerance
        super().__init__(
            f"Invalid {key} tolerance {tolerance}: must be between 0 and 100"
        )


class InvalidGoalError(NomNomError):
    """Raised when a goal target is not a positive number."""

    def __init__(self, key: str, target: float):
        self.key = key
        self.target = target
        super().__init__(f"Invalid {key} target {target}: must be greater than 0")


class GoalNotConfiguredError(NomNomError):
    """Raised when updating tolerance or direction of a goal that does not exist."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No {key} goal set. Provide a {key} target first.")


class InvalidDateError(NomNomError):
    """Raised when a reference date cannot be parsed."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(
            f"Invalid date '{raw}': use YYYY-MM-DD or a day offset like -1"
        )


class InvalidTimezoneError(NomNomError):
    """Raised when a timezone name is not a known IANA zone."""

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(
            f"Invalid timezone '{timezone}': use an IANA name like America/Los_Angeles"
        )
