"""
Record Store Interface.

Protocol-based interface for the remote tabular store that holds component
records. Implementations: Google Sheets values API (now).

Invariants:
- Identity is positional: position p addresses the p-th loaded record
- clear() blanks a row in place; later rows never shift
- Every write is a single-row request, so no partial batch state exists
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import ComponentRecord


class RecordStorePort(Protocol):
    """
    Remote record store interface.

    Positions are zero-based offsets into the sequence last returned by
    load_all(), kept in step with append() and clear().
    """

    async def load_all(self) -> list[ComponentRecord]:
        """
        Fetch every record with a non-empty name, in row order.

        Returns:
            Records in row order; empty list if the store has no data rows

        Raises:
            ConfigurationError: If credentials or store id are not set
            TransportError: If the remote call fails
        """
        ...

    async def append(self, record: ComponentRecord) -> ComponentRecord:
        """Write a new row after the last known row. Returns the record as written."""
        ...

    async def update(self, position: int, record: ComponentRecord) -> ComponentRecord:
        """Overwrite the row at position. Returns the record as written."""
        ...

    async def clear(self, position: int) -> None:
        """Blank the row at position without shifting later rows."""
        ...


class StoreError(Exception):
    """Base class for record store errors."""


class ConfigurationError(StoreError):
    """Raised when the access credential or store identifier is unset."""


class TransportError(StoreError):
    """Raised when a remote call does not succeed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
