"""
Exception hierarchy for the reporting system.
"""

from typing import Iterable, Optional


class ReportingError(Exception):
    """Base class for all reporting errors."""

    pass


class ConfigurationMissingError(ReportingError):
    """Raised when a required setting is absent.

    Attributes:
        missing: Names of the environment variables that were not set
    """

    def __init__(self, missing: Iterable[str], purpose: Optional[str] = None):
        self.missing = list(missing)
        self.purpose = purpose
        message = f"Missing required configuration: {', '.join(self.missing)}"
        if purpose:
            message = f"{message} (needed for {purpose})"
        super().__init__(message)


class UpstreamFetchError(ReportingError):
    """Raised when the time-tracking API could not be read."""

    pass


class SinkError(ReportingError):
    """Raised when a finished report could not be written or uploaded."""

    pass
