"""AI product photo studio: turn a product snapshot into an e-commerce photo."""

from .models import AppStatus, ImagePayload, GenerationResult, DownloadArtifact
from .state import StudioState, StudioController
from .config import AppConfig, get_config

__version__ = "1.0.0"

__all__ = [
    "AppStatus",
    "ImagePayload",
    "GenerationResult",
    "DownloadArtifact",
    "StudioState",
    "StudioController",
    "AppConfig",
    "get_config",
]
