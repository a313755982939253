"""Viewer-side accumulators across successive polls of the shared record."""
from __future__ import annotations

import math
from collections import deque
from typing import Deque, Dict, List, Optional


class RunningStatistics:
    """Average / max / min rainfall over the readings seen so far."""

    def __init__(self):
        self.avg_rainfall = 0.0
        self.max_rainfall = 0.0
        self.min_rainfall = math.inf
        self.total_readings = 0

    def add(self, rainfall: float) -> bool:
        """Fold one reading in. Non-numeric, non-finite and out-of-range
        readings are skipped (returns False)."""
        if not isinstance(rainfall, (int, float)):
            return False
        try:
            rainfall = float(rainfall)
        except OverflowError:
            return False
        if not math.isfinite(rainfall):
            return False
        count = self.total_readings + 1
        self.avg_rainfall = (self.avg_rainfall * self.total_readings + rainfall) / count
        self.max_rainfall = max(self.max_rainfall, rainfall)
        self.min_rainfall = min(self.min_rainfall, rainfall)
        self.total_readings = count
        return True

    def as_dict(self) -> Dict:
        return {
            "avg_rainfall": round(self.avg_rainfall, 2),
            "max_rainfall": round(self.max_rainfall, 2),
            "min_rainfall": round(self.min_rainfall, 2) if self.total_readings else None,
            "total_readings": self.total_readings,
        }


class RainfallHistory:
    """Bounded chart history of ``{time, rainfall, intensity}`` points."""

    def __init__(self, max_length: int = 20):
        self._points: Deque[Dict] = deque(maxlen=max_length)

    def append(self, time: str, rainfall: float, intensity: float) -> None:
        self._points.append({"time": time, "rainfall": rainfall, "intensity": intensity})

    def points(self) -> List[Dict]:
        return list(self._points)

    def latest(self) -> Optional[Dict]:
        return self._points[-1] if self._points else None

    def __len__(self) -> int:
        return len(self._points)
