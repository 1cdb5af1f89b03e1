"""
Gemini-based generation client.

Sends the uploaded product photo plus a composed instruction to a multimodal
Gemini model and normalizes the returned content parts into a GenerationResult.
"""

import logging
from typing import Any, List, Optional

from google import genai
from google.genai import types

from .config import AppConfig, get_config
from .constants import (
    GENERATED_IMAGE_NAME,
    GENERATED_MEDIA_TYPE,
    GENERATION_FAILED_PREFIX,
    NO_IMAGE_MESSAGE,
    PROMPT_SCAFFOLD,
    UNKNOWN_GENERATION_ERROR,
)
from .exceptions import GenerationError
from .models import GenerationResult, ImagePayload

logger = logging.getLogger(__name__)


def compose_prompt(user_prompt: str) -> str:
    """Combine the fixed photographic scaffold with the user's request."""
    return PROMPT_SCAFFOLD.format(user_prompt=user_prompt)


def _response_parts(response: Any) -> List[Any]:
    """Content parts of the first candidate, or an empty list."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    if content is None or not content.parts:
        return []
    return list(content.parts)


def parse_response(response: Any) -> GenerationResult:
    """
    Normalize a generate_content response.

    The first inline-image part becomes the result image; text parts are
    joined into the advisory message.
    """
    image: Optional[ImagePayload] = None
    texts: List[str] = []

    for part in _response_parts(response):
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and inline_data.data:
            if image is None:
                image = ImagePayload.from_bytes(
                    inline_data.data,
                    media_type=inline_data.mime_type or GENERATED_MEDIA_TYPE,
                    name=GENERATED_IMAGE_NAME,
                )
        elif getattr(part, "text", None):
            texts.append(part.text)

    text = "\n".join(texts) if texts else None
    return GenerationResult(image=image, text=text)


class GenerationClient:
    """
    Wraps the single outbound call to the image generation model.

    Example:
        >>> client = GenerationClient()
        >>> result = client.generate(image, "on a wooden table")
        >>> result.image.media_type
        'image/png'
    """

    def __init__(self, config: Optional[AppConfig] = None, client: Any = None):
        """
        Initialize the generation client.

        Args:
            config: App configuration (defaults to the global config)
            client: Pre-built google.genai.Client (mainly for tests)

        Raises:
            MissingCredentialError: If no client is given and no API key is set
        """
        self.config = config or get_config()
        self.model_name = self.config.model_name
        if client is None:
            client = genai.Client(api_key=self.config.require_api_key())
            logger.info(f"Initialized Gemini client with model: {self.model_name}")
        self._client = client

    def build_contents(self, image: ImagePayload, user_prompt: str) -> List[types.Part]:
        """Build the [image, instruction] parts of the request."""
        return [
            types.Part.from_bytes(data=image.to_bytes(), mime_type=image.media_type),
            types.Part.from_text(text=compose_prompt(user_prompt)),
        ]

    def generate(self, image: ImagePayload, user_prompt: str) -> GenerationResult:
        """
        Generate a professional version of the product photo.

        Args:
            image: Uploaded product photo
            user_prompt: Free-text styling instruction

        Returns:
            GenerationResult with the generated image and any advisory text

        Raises:
            GenerationError: If the request fails or no image is returned
        """
        try:
            logger.info(f"Requesting generation for {image.name!r} with {self.model_name}")
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=self.build_contents(image, user_prompt),
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE", "TEXT"],
                ),
            )
            result = parse_response(response)
            if not result.has_image:
                raise GenerationError(NO_IMAGE_MESSAGE, advisory=result.text)
            logger.info(f"Generation succeeded for {image.name!r}")
            return result

        except GenerationError as e:
            logger.error(f"Error generating professional photo: {e}")
            raise GenerationError(
                f"{GENERATION_FAILED_PREFIX}: {e.message}", advisory=e.advisory
            ) from e
        except Exception as e:
            logger.error(f"Error generating professional photo: {e}", exc_info=True)
            message = str(e)
            if not message:
                raise GenerationError(UNKNOWN_GENERATION_ERROR) from e
            raise GenerationError(f"{GENERATION_FAILED_PREFIX}: {message}") from e
