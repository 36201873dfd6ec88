# ABOUTME: Exception types raised by the weather metrics engine.
# ABOUTME: The web layer converts MetricsValidationError into a 400 response.


class MetricsError(Exception):
    """Base exception for all weather metrics errors."""


class MetricsValidationError(MetricsError):
    """Raised when one or more required numeric fields are missing or invalid."""

    summary = "Validation error"

    def __init__(self, details: list[str]) -> None:
        self.details = list(details)
        super().__init__(f"{self.summary}: {'; '.join(self.details)}")
