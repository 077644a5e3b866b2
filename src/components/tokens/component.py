"""
Tokens component - Render design tokens as documentation snippets.

Pure functions; no I/O apart from load_tokens().

- render_color_palette: swatch grid of every `color` token under `global`
- render_type_scale: sample lines for `global.fontFamilies` and `global.fontSize`
"""

from __future__ import annotations

import html
import json
from pathlib import Path
from typing import Any

from .models import DesignToken, TokenSet

SAMPLE_TEXT = "The quick brown fox jumps over the lazy dog"


def _is_token(entry: Any) -> bool:
    return isinstance(entry, dict) and "$value" in entry


def load_tokens(path: Path) -> TokenSet:
    """
    Load a token file.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the file is not valid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"Token file not found at: {path}")
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in token file {path}: {e}") from e
    return TokenSet.model_validate(data)


def color_tokens(tokens: TokenSet) -> dict[str, DesignToken]:
    """Top-level tokens whose $type is color, in file order."""
    colors = {}
    for name, entry in tokens.global_.items():
        if _is_token(entry) and entry.get("$type") == "color":
            colors[name] = DesignToken.model_validate(entry)
    return colors


def token_group(tokens: TokenSet, group: str) -> dict[str, DesignToken]:
    """Tokens of a nested group such as fontFamilies; empty if absent."""
    entries = tokens.global_.get(group)
    if not isinstance(entries, dict):
        return {}
    return {
        name: DesignToken.model_validate(entry)
        for name, entry in entries.items()
        if _is_token(entry)
    }


def render_color_palette(tokens: TokenSet) -> str:
    swatches = []
    for name, token in color_tokens(tokens).items():
        value = html.escape(token.text, quote=True)
        swatches.append(
            '<div style="text-align: center;">'
            f'<div style="width: 100%; height: 100px; background: {value}; '
            'border-radius: 8px; border: 1px solid #ddd;"></div>'
            f"<h4>{html.escape(name)}</h4>"
            f"<code>{value}</code>"
            "</div>"
        )

    return (
        '<div style="display: grid; grid-template-columns: repeat(auto-fill, '
        'minmax(200px, 1fr)); gap: 20px; padding: 20px;">'
        + "".join(swatches)
        + "</div>"
    )


def render_type_scale(tokens: TokenSet) -> str:
    families = [
        f'<p style="font-family: {html.escape(token.text, quote=True)}">'
        f"{html.escape(name)}: {SAMPLE_TEXT}</p>"
        for name, token in token_group(tokens, "fontFamilies").items()
    ]
    sizes = [
        f'<p style="font-size: {html.escape(token.text, quote=True)}px">'
        f"{html.escape(name)} - {html.escape(token.text)}px</p>"
        for name, token in token_group(tokens, "fontSize").items()
    ]

    return (
        '<div style="padding: 20px;">'
        "<h2>Font Families</h2>"
        + "".join(families)
        + "<h2>Font Sizes</h2>"
        + "".join(sizes)
        + "</div>"
    )
