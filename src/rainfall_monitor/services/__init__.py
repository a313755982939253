from .controller import RainfallController
from .monitor import DashboardMonitor

__all__ = ["RainfallController", "DashboardMonitor"]
