"""
Studio state holder.

StudioState carries everything the page renders. StudioController is the only
writer: each operation applies one update and then notifies listeners so the
view can re-render.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .constants import (
    DEFAULT_PROMPT,
    DOWNLOAD_FALLBACK_NAME,
    DOWNLOAD_PREFIX,
    NO_IMAGE_FALLBACK_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)
from .exceptions import GenerationError
from .models import AppStatus, DownloadArtifact, GenerationResult, ImagePayload

logger = logging.getLogger(__name__)

Listener = Callable[["StudioState"], None]


@dataclass
class StudioState:
    """Complete page state."""
    status: AppStatus = AppStatus.IDLE
    original_image: Optional[ImagePayload] = None
    generated_image: Optional[ImagePayload] = None
    prompt: str = DEFAULT_PROMPT
    error: Optional[str] = None
    advisory: Optional[str] = None

    @property
    def is_processing(self) -> bool:
        return self.status == AppStatus.PROCESSING

    @property
    def can_generate(self) -> bool:
        """A request may start only with an image and none in flight."""
        return self.original_image is not None and not self.is_processing

    @property
    def can_download(self) -> bool:
        return self.status == AppStatus.SUCCESS and self.generated_image is not None


class StudioController:
    """Applies state transitions for one session."""

    def __init__(self, state: Optional[StudioState] = None):
        self.state = state or StudioState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # ========================================================================
    # User input
    # ========================================================================

    def set_prompt(self, prompt: str) -> None:
        self.state.prompt = prompt
        self._notify()

    def upload(self, image: ImagePayload) -> None:
        """Accept a new original image and clear any previous result."""
        state = self.state
        state.original_image = image
        state.generated_image = None
        state.error = None
        state.advisory = None
        state.status = AppStatus.IDLE
        logger.info(f"Uploaded {image.name!r} ({image.media_type})")
        self._notify()

    def start_over(self) -> None:
        """Reset every field, including the prompt, to its initial value."""
        self.state = StudioState()
        logger.info("Session reset")
        self._notify()

    # ========================================================================
    # Generation
    # ========================================================================

    def begin_generation(self) -> bool:
        """
        Move to PROCESSING if a request may start.

        Returns:
            False (and no state change) when there is no original image or a
            request is already in flight
        """
        state = self.state
        if not state.can_generate:
            return False

        state.status = AppStatus.PROCESSING
        state.error = None
        state.generated_image = None
        state.advisory = None
        self._notify()
        return True

    def complete_generation(self, result: GenerationResult) -> None:
        """Apply a generation response."""
        state = self.state
        state.advisory = result.text
        if result.image is not None:
            state.generated_image = result.image
            state.status = AppStatus.SUCCESS
            self._notify()
        else:
            self.fail_generation(result.text or NO_IMAGE_FALLBACK_MESSAGE)

    def fail_generation(self, message: Optional[str], advisory: Optional[str] = None) -> None:
        state = self.state
        state.error = message or UNKNOWN_ERROR_MESSAGE
        if advisory is not None:
            state.advisory = advisory
        state.status = AppStatus.ERROR
        logger.warning(f"Generation failed: {state.error}")
        self._notify()

    def finish(self, outcome: Callable[[], GenerationResult]) -> None:
        """Resolve a pending request by calling outcome() and applying its result."""
        try:
            result = outcome()
        except GenerationError as e:
            self.fail_generation(e.message, advisory=e.advisory)
        except Exception as e:
            logger.error(f"Unexpected generation failure: {e}", exc_info=True)
            self.fail_generation(str(e))
        else:
            self.complete_generation(result)

    def generate(self, client) -> bool:
        """
        Run one generation attempt synchronously.

        Args:
            client: Object with generate(image, prompt) -> GenerationResult

        Returns:
            True if a request was issued
        """
        if not self.begin_generation():
            return False
        image, prompt = self.state.original_image, self.state.prompt
        self.finish(lambda: client.generate(image, prompt))
        return True

    # ========================================================================
    # Download
    # ========================================================================

    def download(self) -> Optional[DownloadArtifact]:
        """Build the download for the generated image, if there is one."""
        state = self.state
        if not state.can_download:
            return None

        original_name = state.original_image.name if state.original_image else ""
        filename = f"{DOWNLOAD_PREFIX}{original_name or DOWNLOAD_FALLBACK_NAME}.png"
        return DownloadArtifact(
            filename=filename,
            data=state.generated_image.to_bytes(),
            media_type=state.generated_image.media_type,
        )
