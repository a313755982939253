from .scada_client import ScadaAPIClient

__all__ = ["ScadaAPIClient"]
