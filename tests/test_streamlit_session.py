"""Tests for Streamlit session helpers and widget callbacks (bare mode)."""

import threading

import pytest
import streamlit as st

from photo_studio.constants import FILE_READ_MESSAGE, INVALID_UPLOAD_MESSAGE
from photo_studio.models import AppStatus, ImagePayload
from photo_studio.streamlit.components.uploader import _on_file_selected
from photo_studio.streamlit.session import (
    add_notification,
    clear_pending,
    get_controller,
    pop_notifications,
    start_over,
    submit_generation,
    widget_key,
)

from fakes import BrokenUploadedFile, FakeUploadedFile


@pytest.fixture(autouse=True)
def clean_session():
    """Start every test with an empty session."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    yield
    for key in list(st.session_state.keys()):
        del st.session_state[key]


@pytest.fixture
def original():
    return ImagePayload.from_bytes(b"original", media_type="image/png", name="bag.png")


class TestPendingGeneration:
    """One request per session, reused across reruns."""

    def test_rerun_reuses_pending_future(self):
        calls = []
        release = threading.Event()

        def request():
            calls.append(1)
            release.wait(5)
            return "result"

        first = submit_generation(request)
        second = submit_generation(request)
        release.set()

        assert first is second
        assert first.result(timeout=5) == "result"
        assert calls == [1]

    def test_clear_pending_allows_next_request(self):
        first = submit_generation(lambda: "first")
        first.result(timeout=5)
        clear_pending()

        second = submit_generation(lambda: "second")

        assert second is not first
        assert second.result(timeout=5) == "second"

    def test_start_over_discards_pending_request(self, original):
        controller = get_controller()
        controller.upload(original)
        controller.begin_generation()
        old_prompt_key = widget_key("prompt")
        release = threading.Event()
        pending = submit_generation(lambda: release.wait(5))

        start_over()
        fresh = submit_generation(lambda: "fresh")
        release.set()

        state = get_controller().state
        assert state.status == AppStatus.IDLE
        assert state.original_image is None
        assert widget_key("prompt") != old_prompt_key
        assert fresh is not pending
        assert fresh.result(timeout=5) == "fresh"


class TestNotifications:
    def test_pop_clears_notifications(self):
        add_notification("saved", "success")

        assert pop_notifications() == [{"message": "saved", "type": "success"}]
        assert pop_notifications() == []


class TestUploadCallback:
    """Tests for the file uploader change callback."""

    def test_valid_file_becomes_original_image(self):
        key = widget_key("upload")
        st.session_state[key] = FakeUploadedFile(b"png-bytes", name="bag.png", type="image/png")

        _on_file_selected(key)

        state = get_controller().state
        assert state.original_image.name == "bag.png"
        assert state.original_image.to_bytes() == b"png-bytes"
        assert pop_notifications() == []

    def test_non_image_shows_notice_without_state_change(self):
        key = widget_key("upload")
        st.session_state[key] = FakeUploadedFile(b"%PDF", name="doc.pdf", type="application/pdf")

        _on_file_selected(key)

        state = get_controller().state
        assert pop_notifications() == [{"message": INVALID_UPLOAD_MESSAGE, "type": "error"}]
        assert state.status == AppStatus.IDLE
        assert state.original_image is None

    def test_read_failure_shows_notice_without_state_change(self):
        key = widget_key("upload")
        st.session_state[key] = BrokenUploadedFile()

        _on_file_selected(key)

        state = get_controller().state
        assert pop_notifications() == [{"message": FILE_READ_MESSAGE, "type": "error"}]
        assert state.status == AppStatus.IDLE
        assert state.original_image is None

    def test_cleared_uploader_is_ignored(self):
        key = widget_key("upload")
        st.session_state[key] = None

        _on_file_selected(key)

        assert get_controller().state.original_image is None
        assert pop_notifications() == []
