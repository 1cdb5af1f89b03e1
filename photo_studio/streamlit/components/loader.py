"""Busy indicator shown while a generation request is pending."""

from html import escape


def render_loader(placeholder, message: str) -> None:
    """Render the spinner and the current status message into a placeholder."""
    placeholder.markdown(
        '<div class="busy-indicator">'
        '<div class="busy-spinner"></div>'
        f'<p class="busy-message">{escape(message)}</p>'
        '</div>',
        unsafe_allow_html=True,
    )
