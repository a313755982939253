"""Exception hierarchy for the rainfall monitoring service.

The hazard engine itself never raises; these errors belong to the record
boundary, the store, the REST layer and the API client.
"""
from typing import Optional


class RainfallMonitorError(Exception):
    """Base class for all service errors."""


class ConfigurationError(RainfallMonitorError):
    """Required configuration (e.g. API_URL) is missing."""


class RecordNotFoundError(RainfallMonitorError):
    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"No data found for id: {record_id}")


class InvalidPayloadError(RainfallMonitorError):
    """A request body or stored record could not be accepted."""

    def __init__(self, error: str, status_code: int = 400, message: Optional[str] = None):
        self.error = error
        self.status_code = status_code
        self.message = message
        super().__init__(error)


class CityValidationError(RainfallMonitorError):
    """A city could not be added to the draft record."""


class ScadaAPIError(RainfallMonitorError):
    """Non-successful response from the rainfall REST API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ReadingValidationError(RainfallMonitorError):
    """A rainfall or duration value for the draft record is out of range."""
