"""Page header with agency branding."""

import streamlit as st

from photo_studio.constants import AGENCY_NAME, APP_TITLE, LOGO_URL


def render_header() -> None:
    col1, col2 = st.columns([1, 7])
    with col1:
        st.image(LOGO_URL, width=56)
    with col2:
        st.markdown(f"### {APP_TITLE}")
        st.caption(AGENCY_NAME)
    st.divider()
