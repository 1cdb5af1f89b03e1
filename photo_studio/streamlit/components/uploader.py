"""Upload control: file picker with drag-and-drop."""

import logging

import streamlit as st

from photo_studio.constants import ACCEPTED_EXTENSIONS
from photo_studio.exceptions import FileReadError, InvalidUploadError
from photo_studio.uploads import read_uploaded_file
from photo_studio.streamlit.session import add_notification, get_controller, widget_key

logger = logging.getLogger(__name__)


def _on_file_selected(key: str) -> None:
    """Turn the selected file into the original image, or show a notice."""
    uploaded_file = st.session_state.get(key)
    if uploaded_file is None:
        return

    try:
        image = read_uploaded_file(uploaded_file)
    except (InvalidUploadError, FileReadError) as e:
        add_notification(str(e), "error")
        return

    get_controller().upload(image)


def render_uploader(disabled: bool = False) -> None:
    """Render the drop zone."""
    key = widget_key("upload")
    st.file_uploader(
        "**Klik untuk upload** atau seret file",
        type=ACCEPTED_EXTENSIONS,
        accept_multiple_files=False,
        key=key,
        on_change=_on_file_selected,
        args=(key,),
        disabled=disabled,
    )
    st.markdown('<p class="upload-hint">PNG, JPG, or WEBP</p>', unsafe_allow_html=True)
