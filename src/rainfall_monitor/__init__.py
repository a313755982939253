"""Rainfall Monitor: hazard assessment and shared-record dashboard service."""

__version__ = "0.1.0"
