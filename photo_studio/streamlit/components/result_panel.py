"""Right column: pending request, error, generated photo and download."""

import logging
from html import escape

import streamlit as st

from photo_studio.busy import MessageRotator, wait_with_messages
from photo_studio.config import AppConfig
from photo_studio.state import StudioController
from photo_studio.streamlit.components.image import render_image
from photo_studio.streamlit.components.loader import render_loader
from photo_studio.streamlit.session import clear_pending, get_generation_client, submit_generation

logger = logging.getLogger(__name__)


def _run_pending_generation(controller: StudioController, config: AppConfig) -> None:
    """Wait for the in-flight request with the busy indicator, then apply it."""
    state = controller.state
    image, prompt = state.original_image, state.prompt
    client = get_generation_client()
    future = submit_generation(lambda: client.generate(image, prompt))

    placeholder = st.empty()
    wait_with_messages(
        future,
        show=lambda message: render_loader(placeholder, message),
        rotator=MessageRotator(interval_sec=config.busy_interval_sec),
        poll_interval_sec=config.poll_interval_sec,
    )
    placeholder.empty()

    clear_pending()
    controller.finish(future.result)
    st.rerun()


def render_result_panel(controller: StudioController, config: AppConfig) -> None:
    """Render the result column for the current state."""
    st.markdown("#### 2. Hasil Foto AI")
    state = controller.state

    if state.is_processing:
        _run_pending_generation(controller, config)
        return

    if state.error:
        st.markdown(
            '<div class="result-error"><p><b>Oops! Terjadi Kesalahan</b></p>'
            f'<p>{escape(state.error)}</p></div>',
            unsafe_allow_html=True,
        )

    if state.generated_image:
        render_image(state.generated_image, alt="Generated Product")

    if state.advisory:
        st.caption(state.advisory)

    if not state.error and not state.generated_image:
        st.markdown(
            '<div class="result-placeholder">Hasil foto AI Anda akan muncul di sini.</div>',
            unsafe_allow_html=True,
        )

    artifact = controller.download()
    if artifact is not None:
        st.download_button(
            "Unduh Hasil",
            data=artifact.data,
            file_name=artifact.filename,
            mime=artifact.media_type,
            type="primary",
            width="stretch",
            key="download_result",
        )
