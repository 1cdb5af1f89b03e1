"""Core data models for the photo studio."""

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AppStatus(str, Enum):
    """Phase of the current generation attempt."""
    IDLE = "idle"
    UPLOADING = "uploading"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ImagePayload:
    """Encoded image held in memory for the lifetime of the session."""
    base64: str
    media_type: str
    name: str

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str, name: str) -> "ImagePayload":
        """Encode raw bytes into a payload."""
        return cls(
            base64=base64.b64encode(data).decode("ascii"),
            media_type=media_type,
            name=name,
        )

    @property
    def data_url(self) -> str:
        """Data URL suitable for an <img> src."""
        return f"data:{self.media_type};base64,{self.base64}"

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.base64)


@dataclass(frozen=True)
class GenerationResult:
    """Normalized response of the generation service."""
    image: Optional[ImagePayload] = None
    text: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return self.image is not None


@dataclass(frozen=True)
class DownloadArtifact:
    """File download synthesized from the generated image."""
    filename: str
    data: bytes
    media_type: str
