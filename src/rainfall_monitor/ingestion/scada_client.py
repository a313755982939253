"""HTTP client for the shared rainfall record API."""
from typing import Dict, Optional, Union

import requests

from rainfall_monitor.config import settings
from rainfall_monitor.domain.record import RainfallRecord
from rainfall_monitor.errors import ConfigurationError, ScadaAPIError
from rainfall_monitor.logger import get_logger

log = get_logger(__name__)


class ScadaAPIClient:
    """Wrapper for reading and writing ``<api_url>/data/<scada_id>``."""

    def __init__(self, api_url: Optional[str] = None, scada_id: Optional[str] = None,
                 timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.api_url = (api_url or settings.API_URL or "").rstrip("/")
        if not self.api_url:
            raise ConfigurationError("API URL is not configured. Set API_URL in the environment or .env")
        self.scada_id = scada_id or settings.SCADA_ID
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def record_url(self) -> str:
        return f"{self.api_url}/data/{self.scada_id}"

    def _request(self, method: str, **kwargs) -> Dict:
        headers = {"Content-Type": "application/json", "Cache-Control": "no-store"}
        try:
            response = self.session.request(
                method, self.record_url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            log.error(f"{method} {self.record_url} failed: {e}")
            raise ScadaAPIError(str(e)) from e
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("error") or body.get("message") or f"HTTP error! status: {response.status_code}"
            log.error(f"{method} {self.record_url} returned {response.status_code}: {message}")
            raise ScadaAPIError(message, status_code=response.status_code)
        return response.json()

    def get_data(self) -> Dict:
        """Fetch the current ``{id, data, timestamp}`` item."""
        return self._request("GET")

    def get_record(self) -> RainfallRecord:
        return RainfallRecord.from_data(self.get_data().get("data") or {})

    def update_data(self, data: Union[RainfallRecord, Dict]) -> Dict:
        """Replace the shared record; returns ``{message, id, timestamp}``."""
        if isinstance(data, RainfallRecord):
            data = data.to_data()
        return self._request("PUT", json={"data": data})

    def close(self):
        self.session.close()
