"""Viewer-side polling of the shared record.

Keeps the chart history and running statistics across polls and renders a
plain-text alert report for terminals.
"""
from datetime import datetime
from typing import Dict, Optional
import time

import pytz

from rainfall_monitor.config import settings
from rainfall_monitor.domain import facets
from rainfall_monitor.domain.record import RainfallRecord
from rainfall_monitor.domain.statistics import RainfallHistory, RunningStatistics
from rainfall_monitor.errors import RainfallMonitorError
from rainfall_monitor.ingestion.scada_client import ScadaAPIClient
from rainfall_monitor.logger import get_logger

log = get_logger(__name__)


class DashboardMonitor:

    def __init__(self, client: Optional[ScadaAPIClient] = None, history_length: Optional[int] = None,
                 timezone: Optional[str] = None):
        self.client = client or ScadaAPIClient()
        self.history = RainfallHistory(history_length or settings.HISTORY_LENGTH)
        self.statistics = RunningStatistics()
        self.tz = pytz.timezone(timezone or settings.TIMEZONE)
        self.record: Optional[RainfallRecord] = None
        self.last_update: Optional[datetime] = None
        self.last_error: Optional[str] = None

    def poll_once(self) -> Optional[RainfallRecord]:
        """Fetch the record once. Failures are kept in `last_error`, not raised."""
        try:
            item = self.client.get_data()
            record = RainfallRecord.from_data(item.get("data") or {})
        except (RainfallMonitorError, ValueError) as e:
            self.last_error = str(e) or "Failed to fetch data"
            log.warning(f"Poll failed: {self.last_error}")
            return None
        self.record = record
        self.last_error = None
        self.last_update = datetime.fromtimestamp(item.get("timestamp", 0) / 1000.0, tz=pytz.UTC).astimezone(self.tz)
        self.history.append(self.last_update.strftime("%H:%M:%S"), record.rainfall, record.intensity)
        self.statistics.add(record.rainfall)
        return record

    def run(self, interval_seconds: float = None, max_iterations: int = 1, on_update=None) -> None:
        """Poll ``max_iterations`` times, sleeping ``interval_seconds`` in between."""
        if interval_seconds is None:
            interval_seconds = settings.POLL_INTERVAL_MS / 1000.0
        for iteration in range(max_iterations):
            self.poll_once()
            if on_update is not None:
                on_update(self)
            if iteration < max_iterations - 1:
                time.sleep(interval_seconds)

    def snapshot(self) -> Dict:
        if self.record is None:
            return {"error": self.last_error, "statistics": self.statistics.as_dict()}
        return {
            "last_update": self.last_update.isoformat() if self.last_update else None,
            "alert": facets.warning_alert(self.record),
            "cities": facets.affected_cities(self.record),
            "statistics": facets.statistics_snapshot(self.record),
            "running_statistics": self.statistics.as_dict(),
            "history": self.history.points(),
        }

    def generate_alert_report(self) -> str:
        report = ["=" * 70, "Rainfall Monitoring Alert Report", "=" * 70]
        if self.last_update:
            report.append(f"Last update: {self.last_update.strftime('%Y-%m-%d %H:%M:%S %Z')}")
        if self.last_error:
            report.append(f"[Error] {self.last_error}")
        if self.record is None:
            report.extend(["No data available", "=" * 70])
            return "\n".join(report)

        alert = facets.warning_alert(self.record)
        conditions = alert["conditions"]
        report.extend([
            "",
            f"[{alert['title']}]",
            alert["description"],
            f"Rainfall: {conditions['rainfall_mm']:.1f} mm  Intensity: {conditions['intensity_mmhr']:.2f} mm/hr  "
            f"Duration: {conditions['duration_hours']:g} hrs  Region: {conditions['region']}",
            "",
            "[Recommendations]",
        ])
        report.extend(f"  {line}" for line in alert["numbered_recommendations"])

        cities = facets.affected_cities(self.record)
        report.extend([
            "",
            "[Affected Cities]",
            f"Monitored: {cities['total_cities']}  Critical: {cities['critical_cities']}  "
            f"Danger: {cities['danger_cities']}  Population: {cities['total_population']:,}",
        ])
        for city in cities["cities"]:
            report.append(
                f"  {city['status'].upper():<8} {city['name']} - {city['rainfall']:.1f} mm, "
                f"{city['population']:,} people")

        stats = self.statistics.as_dict()
        if stats["total_readings"]:
            report.extend([
                "",
                "[Statistics]",
                f"Readings: {stats['total_readings']}  Avg: {stats['avg_rainfall']:.2f} mm  "
                f"Max: {stats['max_rainfall']:.2f} mm  Min: {stats['min_rainfall']:.2f} mm",
            ])
        outlook = facets.statistics_snapshot(self.record)["outlook"]
        report.extend(["", "[Outlook]", outlook["intensity"], outlook["duration"], outlook["region"]])
        report.append("=" * 70)
        return "\n".join(report)
