"""Configuration management for Rainfall Monitor.

This module provides centralized configuration management using Pydantic Settings.
It handles environment variables for the MongoDB record store, the dashboard
API client and viewer polling, with automatic .env file loading.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import ClassVar, List, Optional
import os


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes
    ----------
    APP_NAME : str
        Application name identifier.
    MONGODB_URL : str
        MongoDB host and port (default: localhost:27017).
    MONGODB_NAME : str
        Name of the MongoDB database to use.
    MONGO_INITDB_ROOT_USERNAME : str, optional
        MongoDB root username for authentication.
    MONGO_INITDB_ROOT_PASSWORD : str, optional
        MongoDB root password for authentication.
    SCADA_COLLECTION : str
        Collection holding the shared `{id, data, timestamp}` records.
    SCADA_ID : str
        Identifier of the shared record read and written by the dashboard.
    API_URL : str, optional
        Base URL of the rainfall REST API used by the client/CLI.
    POLL_INTERVAL_MS : int
        Viewer polling interval in milliseconds.
    HISTORY_LENGTH : int
        Number of readings kept for the rainfall chart history.
    CORS_ORIGINS : list of str
        Origins allowed to call the REST API.
    TIMEZONE : str
        Timezone used when rendering record timestamps.
    LOG_LEVEL : str
        Minimum loguru level for the console sink.
    """
    APP_NAME: str = "rainfall-monitor"
    MONGODB_URL: str = "localhost:27017"
    MONGODB_NAME: str = "rainfall_monitor"
    MONGO_INITDB_ROOT_USERNAME: Optional[str] = None
    MONGO_INITDB_ROOT_PASSWORD: Optional[str] = None
    SCADA_COLLECTION: str = "scada_data"
    SCADA_ID: str = "scada001"
    API_URL: Optional[str] = None
    POLL_INTERVAL_MS: int = 5000
    HISTORY_LENGTH: int = 20
    CORS_ORIGINS: List[str] = ["*"]
    TIMEZONE: str = "UTC"
    LOG_LEVEL: str = "INFO"

    env_path: ClassVar[str] = os.path.join(os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ".env")
    model_config = SettingsConfigDict(env_file=env_path, extra="ignore")


settings = Settings()
