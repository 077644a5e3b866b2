"""
Catalog component - Record cache and filtered card views.

Holds the authoritative, ordered list of component records. The list mirrors
the remote row order, because the row position is the only key the store
understands for update and clear.

Filtering is conjunctive:
- category: exact match, or any when unset
- status: exact match, or any when unset
- search: case-insensitive substring of name, usage or content guidelines

Filtered views are lazy and never mutate the cache. Use position_of() to map
a record from a view back to its position before touching the store.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from src.domain.entities import DEFAULT_STATUS, ComponentRecord

from .models import FilterInput, RecordCard

ELLIPSIS = "..."
DEFAULT_PREVIEW_LENGTH = 120
DEFAULT_EXAMPLES_PREVIEW_LENGTH = 100


def truncate(text: str, limit: int) -> str:
    """Return text unchanged if it fits, else the first `limit` chars plus '...'."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def _matches(record: ComponentRecord, inp: FilterInput, needle: str) -> bool:
    if inp.category and record.category != inp.category:
        return False
    if inp.status and record.status != inp.status:
        return False
    if needle:
        haystacks = (record.name, record.usage_guidelines, record.content_guidelines)
        return any(needle in text.lower() for text in haystacks)
    return True


def filter_records(
    records: Iterable[ComponentRecord], inp: FilterInput
) -> Iterator[ComponentRecord]:
    """Lazily yield the records matching every active criterion, in order."""
    needle = inp.search.lower()
    return (record for record in records if _matches(record, inp, needle))


class RecordCache:
    """Ordered in-memory record list, kept in step with the remote store."""

    def __init__(self, records: Iterable[ComponentRecord] = ()) -> None:
        self._records: list[ComponentRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ComponentRecord]:
        return iter(self._records)

    def __getitem__(self, position: int) -> ComponentRecord:
        return self._records[position]

    @property
    def records(self) -> list[ComponentRecord]:
        return list(self._records)

    def replace_all(self, records: Iterable[ComponentRecord]) -> None:
        self._records = list(records)

    def append(self, record: ComponentRecord) -> int:
        self._records.append(record)
        return len(self._records) - 1

    def update_at(self, position: int, record: ComponentRecord) -> None:
        self._records[position] = record

    def remove_at(self, position: int) -> ComponentRecord:
        return self._records.pop(position)

    def filter(
        self,
        category: str | None = None,
        status: str | None = None,
        search: str = "",
    ) -> Iterator[ComponentRecord]:
        return filter_records(
            self._records, FilterInput(category=category, status=status, search=search)
        )

    def position_of(self, record: ComponentRecord) -> int:
        """
        Resolve the authoritative position of a record object.

        Matches by identity, not equality: two records with identical fields
        still live on different rows.

        Raises:
            ValueError: If the record is not held by this cache.
        """
        for position, held in enumerate(self._records):
            if held is record:
                return position
        raise ValueError("Record is not in the cache")

    def categories(self) -> list[str]:
        """Distinct non-empty categories in first-seen order."""
        return list(dict.fromkeys(r.category for r in self._records if r.category))


def build_card(
    record: ComponentRecord,
    position: int,
    *,
    preview_length: int = DEFAULT_PREVIEW_LENGTH,
    examples_preview_length: int = DEFAULT_EXAMPLES_PREVIEW_LENGTH,
) -> RecordCard:
    status = record.status or DEFAULT_STATUS
    usage = record.usage_guidelines or "No usage guidelines provided"
    content = record.content_guidelines or "No content guidelines provided"
    examples = (
        truncate(record.content_examples, examples_preview_length)
        if record.content_examples
        else None
    )

    return RecordCard(
        position=position,
        name=record.name or "Unnamed Component",
        status=status,
        status_class=status.lower(),
        category=record.category or "Uncategorized",
        usage_preview=truncate(usage, preview_length),
        content_preview=truncate(content, preview_length),
        examples_preview=examples,
    )


def build_cards(
    cache: RecordCache,
    inp: FilterInput,
    *,
    preview_length: int = DEFAULT_PREVIEW_LENGTH,
    examples_preview_length: int = DEFAULT_EXAMPLES_PREVIEW_LENGTH,
) -> list[RecordCard]:
    """Cards for the filtered view; each carries its position in the cache."""
    return [
        build_card(
            record,
            cache.position_of(record),
            preview_length=preview_length,
            examples_preview_length=examples_preview_length,
        )
        for record in filter_records(cache, inp)
    ]
