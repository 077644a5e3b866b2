"""
Catalog component - Record cache, filtering and card view models.
"""

from .component import (
    RecordCache,
    build_card,
    build_cards,
    filter_records,
    truncate,
)
from .models import FilterInput, RecordCard

__all__ = [
    # Cache
    "RecordCache",
    # Views
    "build_card",
    "build_cards",
    "filter_records",
    "truncate",
    # Models
    "FilterInput",
    "RecordCard",
]
