# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "eventboard")
        self.events_collection: Final[str] = os.getenv("EVENTS_COLLECTION", "events")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

        # Session Configuration
        # Fixed user for the static session provider; empty means signed out
        self.session_user_id: Final[str] = os.getenv("SESSION_USER_ID", "")

        # Display Configuration
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "Europe/Zagreb")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
