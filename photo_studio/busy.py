"""Busy indicator: cycles status messages while a request is pending."""

import time
from concurrent.futures import Future
from typing import Callable, Optional, Sequence

from .constants import BUSY_INTERVAL_SEC, BUSY_MESSAGES


class MessageRotator:
    """Maps elapsed time to one of a fixed list of messages."""

    def __init__(
        self,
        messages: Sequence[str] = BUSY_MESSAGES,
        interval_sec: float = BUSY_INTERVAL_SEC,
    ):
        if not messages:
            raise ValueError("messages must not be empty")
        if interval_sec <= 0:
            raise ValueError("interval_sec must be positive")
        self.messages = list(messages)
        self.interval_sec = interval_sec

    def message_at(self, elapsed_sec: float) -> str:
        index = int(max(elapsed_sec, 0.0) // self.interval_sec) % len(self.messages)
        return self.messages[index]


def wait_with_messages(
    future: Future,
    show: Callable[[str], None],
    rotator: Optional[MessageRotator] = None,
    poll_interval_sec: float = 0.25,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Block until future resolves, pushing the current message to show().

    show() is called on the first poll and whenever the message changes.
    Returns once the future is done; the result is left on the future.
    """
    rotator = rotator or MessageRotator()
    started = clock()
    current = None
    while not future.done():
        message = rotator.message_at(clock() - started)
        if message != current:
            show(message)
            current = message
        sleep(poll_interval_sec)
