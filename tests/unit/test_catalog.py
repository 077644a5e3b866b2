"""
Catalog component tests: record cache, filtering, truncation and cards.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from src.components.catalog import (
    FilterInput,
    RecordCache,
    build_card,
    build_cards,
    filter_records,
    truncate,
)
from src.domain.entities import ComponentRecord

# --- Fixtures ---


@pytest.fixture
def button() -> ComponentRecord:
    return ComponentRecord(
        name="Button",
        category="Input",
        status="Approved",
        usage_guidelines="Use for the primary action on a page.",
        content_guidelines="Start with a verb.",
    )


@pytest.fixture
def modal() -> ComponentRecord:
    return ComponentRecord(
        name="Modal",
        category="Overlay",
        status="Draft",
        usage_guidelines="Interrupts the user; use sparingly.",
        content_guidelines="Title states the decision.",
    )


@pytest.fixture
def cache(button: ComponentRecord, modal: ComponentRecord) -> RecordCache:
    return RecordCache([button, modal])


# --- Truncation ---


class TestTruncate:
    def test_short_text_unchanged(self) -> None:
        assert truncate("Short", 120) == "Short"

    def test_text_at_limit_unchanged(self) -> None:
        text = "x" * 120
        assert truncate(text, 120) == text

    def test_long_text_cut_with_ellipsis(self) -> None:
        text = "a" * 119 + "bc"
        result = truncate(text, 120)
        assert result == "a" * 119 + "b" + "..."
        assert len(result) == 123

    def test_empty_text(self) -> None:
        assert truncate("", 100) == ""


# --- Filtering ---


class TestFilter:
    def test_category_only(
        self, cache: RecordCache, button: ComponentRecord
    ) -> None:
        assert list(cache.filter("Input", None, "")) == [button]

    def test_search_is_case_insensitive_on_name(
        self, cache: RecordCache, modal: ComponentRecord
    ) -> None:
        assert list(cache.filter(None, None, "MOD")) == [modal]

    def test_search_covers_guidelines(
        self, cache: RecordCache, button: ComponentRecord, modal: ComponentRecord
    ) -> None:
        assert list(cache.filter(None, None, "verb")) == [button]
        assert list(cache.filter(None, None, "SPARINGLY")) == [modal]

    def test_search_ignores_other_fields(self, cache: RecordCache) -> None:
        assert list(cache.filter(None, None, "overlay")) == []

    def test_status_only(self, cache: RecordCache, modal: ComponentRecord) -> None:
        assert list(cache.filter(None, "Draft", "")) == [modal]

    def test_predicates_are_conjunctive(self, cache: RecordCache) -> None:
        assert list(cache.filter("Input", "Draft", "")) == []
        assert list(cache.filter("Input", "Approved", "modal")) == []

    def test_all_predicates_matching(
        self, cache: RecordCache, button: ComponentRecord
    ) -> None:
        assert list(cache.filter("Input", "Approved", "butt")) == [button]

    def test_no_filters_returns_everything_in_order(
        self, cache: RecordCache, button: ComponentRecord, modal: ComponentRecord
    ) -> None:
        assert list(cache.filter()) == [button, modal]
        assert list(filter_records(cache, FilterInput(category="", status=""))) == [
            button,
            modal,
        ]

    def test_category_match_is_exact(self, cache: RecordCache) -> None:
        assert list(cache.filter("input", None, "")) == []

    def test_view_is_lazy_and_non_mutating(self, cache: RecordCache) -> None:
        view = cache.filter(None, None, "modal")
        assert isinstance(view, Iterator)
        list(view)
        assert len(cache) == 2

    def test_order_is_stable(self) -> None:
        records = [ComponentRecord(name=f"Item {i}", category="Layout") for i in range(5)]
        cache = RecordCache(records)
        assert list(cache.filter("Layout")) == records


# --- Cache ---


class TestRecordCache:
    def test_position_of_uses_identity(self) -> None:
        first = ComponentRecord(name="Button")
        twin = ComponentRecord(name="Button")
        cache = RecordCache([first, twin])

        assert first == twin
        assert cache.position_of(first) == 0
        assert cache.position_of(twin) == 1

    def test_position_of_resolves_filtered_record(
        self, cache: RecordCache, modal: ComponentRecord
    ) -> None:
        (found,) = cache.filter(None, None, "modal")
        assert cache.position_of(found) == 1

    def test_position_of_unknown_record(self, cache: RecordCache) -> None:
        with pytest.raises(ValueError):
            cache.position_of(ComponentRecord(name="Button"))

    def test_mutations_keep_order(
        self, cache: RecordCache, button: ComponentRecord, modal: ComponentRecord
    ) -> None:
        tabs = ComponentRecord(name="Tabs")
        dialog = ComponentRecord(name="Dialog")

        assert cache.append(tabs) == 2
        cache.update_at(1, dialog)
        removed = cache.remove_at(0)

        assert removed is button
        assert cache.records == [dialog, tabs]

    def test_replace_all(self, cache: RecordCache) -> None:
        cache.replace_all([ComponentRecord(name="Only")])
        assert [r.name for r in cache] == ["Only"]

    def test_records_is_a_copy(self, cache: RecordCache) -> None:
        cache.records.clear()
        assert len(cache) == 2

    def test_categories_first_seen_without_blanks(self) -> None:
        cache = RecordCache(
            [
                ComponentRecord(name="A", category="Overlay"),
                ComponentRecord(name="B", category=""),
                ComponentRecord(name="C", category="Input"),
                ComponentRecord(name="D", category="Overlay"),
            ]
        )
        assert cache.categories() == ["Overlay", "Input"]


# --- Cards ---


class TestCards:
    def test_card_defaults_for_blank_fields(self) -> None:
        card = build_card(ComponentRecord(name="", status=""), 3)

        assert card.position == 3
        assert card.name == "Unnamed Component"
        assert card.status == "Draft"
        assert card.status_class == "draft"
        assert card.category == "Uncategorized"
        assert card.usage_preview == "No usage guidelines provided"
        assert card.content_preview == "No content guidelines provided"
        assert card.examples_preview is None

    def test_card_previews_truncated(self) -> None:
        record = ComponentRecord(
            name="Toast",
            status="Review",
            usage_guidelines="u" * 130,
            content_guidelines="c" * 120,
            content_examples="e" * 101,
        )

        card = build_card(record, 0)

        assert card.status_class == "review"
        assert card.usage_preview == "u" * 120 + "..."
        assert card.content_preview == "c" * 120
        assert card.examples_preview == "e" * 100 + "..."

    def test_custom_preview_lengths(self) -> None:
        record = ComponentRecord(name="Toast", usage_guidelines="abcdef")
        card = build_card(record, 0, preview_length=3)
        assert card.usage_preview == "abc..."

    def test_cards_carry_cache_positions(self, cache: RecordCache) -> None:
        cards = build_cards(cache, FilterInput(status="Draft"))

        assert [(c.name, c.position) for c in cards] == [("Modal", 1)]

    def test_empty_view(self, cache: RecordCache) -> None:
        assert build_cards(cache, FilterInput(search="nothing matches")) == []
