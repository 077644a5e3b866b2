"""
Catalog component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input Models ---


@dataclass(frozen=True)
class FilterInput:
    """Filter criteria for the card grid. None or "" means "any"."""

    category: str | None = None
    status: str | None = None
    search: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class RecordCard:
    """Summary card for one record in the filtered view."""

    position: int
    name: str
    status: str
    status_class: str
    category: str
    usage_preview: str
    content_preview: str
    examples_preview: str | None = None
