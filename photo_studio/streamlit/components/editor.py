"""Left column: original photo, styling prompt and the generate button."""

import streamlit as st

from photo_studio.state import StudioState
from photo_studio.streamlit.components.image import render_image
from photo_studio.streamlit.session import get_controller, widget_key


def _on_prompt_change(key: str) -> None:
    get_controller().set_prompt(st.session_state[key])


def _on_generate(prompt_key: str) -> None:
    controller = get_controller()
    if prompt_key in st.session_state:
        controller.set_prompt(st.session_state[prompt_key])
    controller.begin_generation()


def render_editor(state: StudioState) -> None:
    """Render the original image with the prompt controls."""
    st.markdown("#### 1. Foto Asli & Arahan")
    render_image(state.original_image, alt="Original Product")
    st.caption(state.original_image.name)

    prompt_key = widget_key("prompt")
    st.text_area(
        "Jelaskan gaya yang Anda inginkan:",
        value=state.prompt,
        height=100,
        key=prompt_key,
        on_change=_on_prompt_change,
        args=(prompt_key,),
        disabled=state.is_processing,
        placeholder="contoh: di atas meja kayu dengan latar belakang tanaman",
    )

    label = "Memproses..." if state.is_processing else "Buat Foto Profesional"
    st.button(
        label,
        type="primary",
        width="stretch",
        disabled=not state.can_generate,
        on_click=_on_generate,
        args=(prompt_key,),
        key=widget_key("generate"),
    )
