"""Session state management for the Streamlit app."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from photo_studio.config import get_config
from photo_studio.generation import GenerationClient
from photo_studio.state import StudioController, StudioState

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "studio_controller"
PENDING_KEY = "pending_generation"
EXECUTOR_KEY = "generation_executor"
WIDGET_GENERATION_KEY = "widget_generation"
NOTIFICATIONS_KEY = "notifications"


def _log_status(state: StudioState) -> None:
    logger.debug(f"Studio status: {state.status.value}")


def get_controller() -> StudioController:
    """Get or create the controller for this browser session."""
    if CONTROLLER_KEY not in st.session_state:
        controller = StudioController()
        controller.subscribe(_log_status)
        st.session_state[CONTROLLER_KEY] = controller
    return st.session_state[CONTROLLER_KEY]


@st.cache_resource
def get_generation_client() -> GenerationClient:
    """Shared generation client (raises MissingCredentialError without a key)."""
    return GenerationClient(get_config())


def widget_key(name: str) -> str:
    """Widget key that changes on every start-over so widgets start fresh."""
    return f"{name}_{st.session_state.get(WIDGET_GENERATION_KEY, 0)}"


def start_over() -> None:
    """Reset the studio and every widget bound to it."""
    get_controller().start_over()
    st.session_state[WIDGET_GENERATION_KEY] = st.session_state.get(WIDGET_GENERATION_KEY, 0) + 1
    # A request still running belongs to the discarded session state
    st.session_state.pop(PENDING_KEY, None)


def _get_executor() -> ThreadPoolExecutor:
    if EXECUTOR_KEY not in st.session_state:
        st.session_state[EXECUTOR_KEY] = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="generation"
        )
    return st.session_state[EXECUTOR_KEY]


def submit_generation(fn: Callable[[], Any]) -> Future:
    """Submit the request once; later reruns get the same future back."""
    pending: Optional[Future] = st.session_state.get(PENDING_KEY)
    if pending is None:
        pending = _get_executor().submit(fn)
        st.session_state[PENDING_KEY] = pending
    return pending


def clear_pending() -> None:
    st.session_state.pop(PENDING_KEY, None)


def add_notification(message: str, type: str = "info") -> None:
    """Add a notification to show the user.

    Args:
        message: The notification message
        type: One of 'info', 'success', 'warning', 'error'
    """
    st.session_state.setdefault(NOTIFICATIONS_KEY, []).append({"message": message, "type": type})


def pop_notifications() -> List[Dict[str, Any]]:
    """Get and clear all notifications."""
    notifications = st.session_state.get(NOTIFICATIONS_KEY, [])
    st.session_state[NOTIFICATIONS_KEY] = []
    return notifications
