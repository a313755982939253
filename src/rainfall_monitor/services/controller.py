"""Controller service: edits the draft record and broadcasts it."""
import math
from typing import Dict, Optional

from pydantic import ValidationError

from rainfall_monitor.domain.record import City, RainfallRecord, derive_intensity
from rainfall_monitor.errors import CityValidationError, ReadingValidationError
from rainfall_monitor.ingestion.scada_client import ScadaAPIClient
from rainfall_monitor.logger import get_logger

log = get_logger(__name__)


def _non_negative(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = math.nan
    if not math.isfinite(number) or number < 0:
        raise ReadingValidationError(f"{name} must be a finite number >= 0, got {value!r}")
    return number


class RainfallController:
    """Holds the record being edited; intensity follows rainfall / duration."""

    def __init__(self, client: Optional[ScadaAPIClient] = None, record: Optional[RainfallRecord] = None):
        self.client = client
        self.record = record or RainfallRecord()

    def set_rainfall(self, rainfall: float) -> None:
        rainfall = _non_negative("Rainfall", rainfall)
        self.record.rainfall = rainfall
        self.record.intensity = derive_intensity(rainfall, self.record.duration)

    def set_duration(self, duration: float) -> None:
        duration = _non_negative("Duration", duration)
        self.record.duration = duration
        self.record.intensity = derive_intensity(self.record.rainfall, duration)

    def set_region(self, region: str) -> None:
        self.record.region = region.strip()

    def set_weather(self, wind_speed: float = None, humidity: float = None, temperature: float = None) -> None:
        if wind_speed is not None:
            self.record.wind_speed = wind_speed
        if humidity is not None:
            self.record.humidity = humidity
        if temperature is not None:
            self.record.temperature = temperature

    def add_city(self, name: str, rainfall: float, population: int) -> City:
        """Append a city; its status is classified now and not revisited."""
        try:
            city = City(name=name.strip(), rainfall=rainfall, population=population)
        except ValidationError as exc:
            raise CityValidationError(
                f"Invalid city {name!r}: name must be non-empty, rainfall >= 0 and population > 0") from exc
        self.record.cities.append(city)
        return city

    def remove_city(self, index: int) -> City:
        if not 0 <= index < len(self.record.cities):
            raise CityValidationError(f"No city at position {index}")
        return self.record.cities.pop(index)

    def submit(self) -> Dict:
        """Send the draft to the API so every viewer picks it up on its next poll."""
        if self.client is None:
            self.client = ScadaAPIClient()
        result = self.client.update_data(self.record)
        log.info(
            f"Broadcast record {result.get('id')}: {self.record.rainfall} mm over "
            f"{self.record.duration} h ({self.record.hazard_level.value})")
        return result
