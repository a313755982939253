from rainfall_monitor.errors import ScadaAPIError
from rainfall_monitor.services.monitor import DashboardMonitor


class FakeClient:
    def __init__(self, items):
        self.items = list(items)

    def get_data(self):
        item = self.items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _item(rainfall, intensity, ts=1704067200000):
    return {
        "id": "scada001",
        "data": {
            "rainfall": rainfall,
            "duration": 2,
            "intensity": intensity,
            "region": "Coastal",
            "cities": [{"name": "Port", "rainfall": 70, "population": 2000, "status": "danger"}],
        },
        "timestamp": ts,
    }


def test_poll_updates_history_and_statistics():
    monitor = DashboardMonitor(client=FakeClient([_item(10, 5), _item(30, 15)]), timezone="UTC")
    monitor.run(interval_seconds=0, max_iterations=2)
    assert monitor.last_error is None
    assert len(monitor.history) == 2
    assert monitor.history.latest()["intensity"] == 15.0
    stats = monitor.statistics.as_dict()
    assert stats["total_readings"] == 2
    assert stats["avg_rainfall"] == 20.0
    assert monitor.last_update.year == 2024


def test_poll_failure_is_recorded():
    monitor = DashboardMonitor(client=FakeClient([ScadaAPIError("HTTP error! status: 500", 500)]))
    assert monitor.poll_once() is None
    assert monitor.last_error == "HTTP error! status: 500"
    assert "No data available" in monitor.generate_alert_report()


def test_failure_keeps_previous_record():
    monitor = DashboardMonitor(client=FakeClient([_item(60, 55), ScadaAPIError("down")]))
    monitor.poll_once()
    monitor.poll_once()
    assert monitor.record.rainfall == 60.0
    assert monitor.last_error == "down"
    assert monitor.statistics.total_readings == 1


def test_alert_report_contents():
    monitor = DashboardMonitor(client=FakeClient([_item(60, 55)]), timezone="UTC")
    monitor.poll_once()
    report = monitor.generate_alert_report()
    assert "[CRITICAL HAZARD LEVEL]" in report
    assert "1. IMMEDIATE EVACUATION of danger zones" in report
    assert "DANGER   Port" in report
    assert "1 cities require immediate attention." in report


def test_snapshot_and_callback():
    seen = []
    monitor = DashboardMonitor(client=FakeClient([_item(5, 1)]))
    monitor.run(interval_seconds=0, max_iterations=1, on_update=seen.append)
    assert seen == [monitor]
    snap = monitor.snapshot()
    assert snap["alert"]["level"] == "low"
    assert snap["cities"]["danger_cities"] == 1
    assert len(snap["history"]) == 1
