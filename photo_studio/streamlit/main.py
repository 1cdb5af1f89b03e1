"""
Main entry point for the product photo studio Streamlit app.

Run with: streamlit run photo_studio/streamlit/main.py
"""

import logging
from datetime import date
from pathlib import Path
import sys

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from photo_studio.config import AppConfig, get_config
from photo_studio.constants import AGENCY_NAME
from photo_studio.exceptions import MissingCredentialError
from photo_studio.logging_config import setup_logger
from photo_studio.state import StudioController
from photo_studio.streamlit.components import (
    render_editor,
    render_header,
    render_result_panel,
    render_uploader,
)
from photo_studio.streamlit.session import (
    get_controller,
    get_generation_client,
    pop_notifications,
    start_over,
)
from photo_studio.streamlit.styles import CUSTOM_CSS

# Streamlit runs this file as __main__; log under the package logger instead
logger = logging.getLogger("photo_studio.streamlit.main")


def show_notifications() -> None:
    """Display any pending notifications."""
    for notif in pop_notifications():
        msg, type_ = notif["message"], notif["type"]
        {"success": st.success, "error": st.error, "warning": st.warning}.get(type_, st.info)(msg)


def check_credentials() -> None:
    """Stop the app when no API key is configured."""
    try:
        get_generation_client()
    except MissingCredentialError as e:
        logger.error(f"Cannot start: {e}")
        st.error(str(e))
        st.stop()


def _render_upload_screen(controller: StudioController) -> None:
    st.markdown(
        '<p class="hero-title">Ubah Foto Produk Anda Menjadi Profesional</p>'
        '<p class="hero-text">Cukup unggah foto produk Anda, dan biarkan AI canggih kami '
        'mengubahnya menjadi gambar berkualitas studio yang siap untuk e-commerce.</p>',
        unsafe_allow_html=True,
    )
    render_uploader(disabled=controller.state.is_processing)


def _render_workspace(controller: StudioController, config: AppConfig) -> None:
    col1, col2 = st.columns(2, gap="large")
    with col1:
        render_editor(controller.state)
    with col2:
        render_result_panel(controller, config)

    st.divider()
    st.button("Mulai Lagi dengan Foto Baru", type="tertiary", on_click=start_over, key="start_over")


def _render_footer() -> None:
    st.markdown(
        f'<p class="studio-footer">© {date.today().year} {AGENCY_NAME}. '
        'Didukung oleh Teknologi AI.</p>',
        unsafe_allow_html=True,
    )


def render_app() -> None:
    """Main app rendering orchestration."""
    config = get_config()

    st.set_page_config(page_title=config.page_title, page_icon=config.page_icon, layout=config.layout)
    st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

    if "initialized" not in st.session_state:
        setup_logger(log_file=config.log_file, level=config.log_level)
        st.session_state.initialized = True

    render_header()
    check_credentials()
    show_notifications()

    controller = get_controller()
    if controller.state.original_image is None:
        _render_upload_screen(controller)
    else:
        _render_workspace(controller, config)

    _render_footer()


def main() -> None:
    """Application entry point."""
    render_app()


if __name__ == "__main__":
    main()
