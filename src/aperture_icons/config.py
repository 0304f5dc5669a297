import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Icons
    icon_base_path: str = os.getenv("ICON_BASE_PATH", "icons/basic")
    icon_handler: str = os.getenv("ICON_HANDLER", "basic")

    # Forwarder
    forwarder_mount_path: str = os.getenv("FORWARDER_MOUNT_PATH", "")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.icon_base_path:
            raise ValueError("ICON_BASE_PATH must not be empty")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the server process.

    Args:
        level: Log level name. Defaults to settings.log_level.
    """
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)
