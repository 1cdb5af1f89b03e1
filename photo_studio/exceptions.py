"""Custom exceptions for the photo studio."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""
    pass


class InvalidUploadError(AppError):
    """Raised when the uploaded file is not an image."""
    pass


class FileReadError(AppError):
    """Raised when an uploaded file cannot be read."""
    pass


class MissingCredentialError(AppError):
    """Raised at startup when no API key is configured."""
    pass


class GenerationError(AppError):
    """Raised when the generation service fails or returns no image."""

    def __init__(self, message: str, advisory: Optional[str] = None):
        self.message = message
        self.advisory = advisory
        super().__init__(message)
