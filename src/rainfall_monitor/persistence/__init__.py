from .database import ScadaDatabase

__all__ = ["ScadaDatabase"]
