"""Render image payloads as plain <img> tags.

The browser decodes the data URL, so bytes it cannot display show up as a
broken image instead of failing the script run.
"""

from html import escape

import streamlit as st

from photo_studio.models import ImagePayload


def image_html(image: ImagePayload, alt: str) -> str:
    return (
        f'<img class="studio-image" src="{image.data_url}" alt="{escape(alt, quote=True)}"/>'
    )


def render_image(image: ImagePayload, alt: str) -> None:
    st.markdown(image_html(image, alt), unsafe_allow_html=True)
