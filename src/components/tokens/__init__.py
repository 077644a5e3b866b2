"""
Tokens component - Design token documentation renderers.
"""

from .component import (
    color_tokens,
    load_tokens,
    render_color_palette,
    render_type_scale,
    token_group,
)
from .models import DesignToken, TokenSet

__all__ = [
    "color_tokens",
    "load_tokens",
    "render_color_palette",
    "render_type_scale",
    "token_group",
    "DesignToken",
    "TokenSet",
]
