"""Photo studio configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

from .constants import APP_TITLE, BUSY_INTERVAL_SEC, DEFAULT_MODEL
from .exceptions import MissingCredentialError


@dataclass
class AppConfig:
    """Configuration for the photo studio app."""

    # Gemini settings
    api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL

    # Busy indicator settings
    busy_interval_sec: float = BUSY_INTERVAL_SEC
    poll_interval_sec: float = 0.25

    # UI settings
    page_title: str = APP_TITLE
    page_icon: str = ":camera:"
    layout: str = "centered"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self):
        if self.busy_interval_sec <= 0:
            raise ValueError(f"busy_interval_sec must be positive, got {self.busy_interval_sec}")
        if self.poll_interval_sec <= 0:
            raise ValueError(f"poll_interval_sec must be positive, got {self.poll_interval_sec}")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables (and a .env file if present).

        Raises:
            ValueError: If a numeric setting is malformed or not positive
        """
        load_dotenv()
        log_file = os.getenv("LOG_FILE")
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            busy_interval_sec=float(os.getenv("BUSY_INTERVAL_SEC", str(BUSY_INTERVAL_SEC))),
            page_title=os.getenv("PAGE_TITLE", APP_TITLE),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
        )

    def require_api_key(self) -> str:
        """Return the API key or fail, since the app cannot run without it."""
        if not self.api_key:
            raise MissingCredentialError(
                "GEMINI_API_KEY environment variable is not set."
            )
        return self.api_key


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Set the global config instance."""
    global _config
    _config = config
