"""Message elements sent to purchasing users."""

from __future__ import annotations

from html import escape


def image_message(src: str) -> str:
    """
    Render an image element pointing at a URL.

    Args:
        src: Image URL.

    Returns:
        Message content such as ``<img src="https://img/1.png"/>``.
    """
    return f'<img src="{escape(src, quote=True)}"/>'
