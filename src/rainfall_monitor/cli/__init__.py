"""CLI package for Rainfall Monitor.

Execute via:
  python -m rainfall_monitor.cli <command> [options]

Or, once installed:
  rainfall-monitor <command>

Commands implemented in `main.py` using the standard library `argparse`.
"""

from .main import main  # re-export for python -m rainfall_monitor.cli

__all__ = ["main"]
