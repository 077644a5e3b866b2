"""
Google Sheets Record Store Adapter.

Implements RecordStorePort over the Sheets v4 values API.

- GET    {base}/{id}/values/{sheet}!{range}?key=...
- PUT    {base}/{id}/values/{sheet}!A{row}:N{row}?valueInputOption=RAW&key=...
- POST   {base}/{id}/values/{sheet}!A{row}:N{row}:clear?key=...

Bodies are JSON with a "values" field holding rows of strings.

Row addressing:
- Sheet row 1 holds the headers; data rows start at sheet row 2
- The adapter remembers which data row each loaded position came from, so
  rows blanked by clear() keep later positions pointing at the right row
- Writes never insert; append() overwrites the row after the last known row
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from src.adapters.clock import SystemClock
from src.core.ports.store import ConfigurationError, TransportError
from src.domain.entities import COLUMN_HEADERS, DEFAULT_STATUS, ComponentRecord
from src.ports.clock import ClockPort
from src.rules.models import SHEETS_BASE_URL, SheetRules

logger = logging.getLogger(__name__)

# httpx logs full request URLs at INFO, and the URL carries the API key
logging.getLogger("httpx").setLevel(logging.WARNING)

# Header row plus 1-based sheet numbering
ROW_OFFSET = 2
FIRST_COLUMN = "A"
LAST_COLUMN = chr(ord(FIRST_COLUMN) + len(COLUMN_HEADERS) - 1)

# Values shipped in sample configs; treated the same as unset
PLACEHOLDER_VALUES = frozenset(
    {
        "YOUR_GOOGLE_SHEETS_API_KEY_HERE",
        "YOUR_GOOGLE_SHEET_ID_HERE",
    }
)


def is_configured_value(value: str | None) -> bool:
    return bool(value and value.strip()) and value not in PLACEHOLDER_VALUES


def resolve_sheet_id(sheet: SheetRules, env: Mapping[str, str] | None = None) -> str:
    """Environment override first, then the rules file."""
    env = os.environ if env is None else env
    return env.get(sheet.sheet_id_env) or sheet.sheet_id


class SheetsRecordStore:
    """
    Google Sheets implementation of RecordStorePort.

    Each call opens a short-lived httpx.AsyncClient. Pass `transport` to
    route requests somewhere other than the network.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        sheet_id: str | None,
        sheet_name: str = "Sheet1",
        cell_range: str = "A1:N1000",
        base_url: str = SHEETS_BASE_URL,
        timeout: float = 30.0,
        clock: ClockPort | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or ""
        self.sheet_id = sheet_id or ""
        self.sheet_name = sheet_name
        self.cell_range = cell_range
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.clock: ClockPort = clock or SystemClock()
        self._transport = transport

        # Data-row offset (0 = first row under the header) per position
        self._rows: list[int] = []
        self._next_row = 0

    @classmethod
    def from_rules(
        cls,
        sheet: SheetRules,
        env: Mapping[str, str] | None = None,
        *,
        clock: ClockPort | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> SheetsRecordStore:
        env = os.environ if env is None else env
        return cls(
            api_key=env.get(sheet.api_key_env),
            sheet_id=resolve_sheet_id(sheet, env),
            sheet_name=sheet.sheet_name,
            cell_range=sheet.range,
            base_url=sheet.base_url,
            timeout=sheet.timeout_seconds,
            clock=clock,
            transport=transport,
        )

    # --- RecordStorePort ---

    async def load_all(self) -> list[ComponentRecord]:
        self._check_config()

        a1_range = f"{self.sheet_name}!{self.cell_range}"
        response = await self._request("GET", a1_range)
        values = self._parse_values(response)

        if len(values) < 2:
            self._rows = []
            self._next_row = 0
            return []

        headers = [str(h) for h in values[0]]
        records: list[ComponentRecord] = []
        rows: list[int] = []

        for offset, row in enumerate(values[1:]):
            if not isinstance(row, list):
                continue
            record = ComponentRecord.from_row(headers, row)
            # Blank and cleared rows carry no name
            if not record.name:
                continue
            records.append(record)
            rows.append(offset)

        self._rows = rows
        self._next_row = len(values) - 1
        logger.info(f"Loaded {len(records)} records from {a1_range}")
        return records

    async def append(self, record: ComponentRecord) -> ComponentRecord:
        self._check_config()
        row = self._next_row
        written = await self._write_row(row, record)
        self._rows.append(row)
        self._next_row = row + 1
        return written

    async def update(self, position: int, record: ComponentRecord) -> ComponentRecord:
        self._check_config()
        return await self._write_row(self._row_for(position), record)

    async def clear(self, position: int) -> None:
        self._check_config()
        row = self._row_for(position)
        await self._request("POST", self._row_range(row), suffix=":clear")
        if 0 <= position < len(self._rows):
            del self._rows[position]

    # --- Internals ---

    def _check_config(self) -> None:
        if not is_configured_value(self.api_key):
            raise ConfigurationError("Google Sheets API key not configured")
        if not is_configured_value(self.sheet_id):
            raise ConfigurationError("Google Sheet ID not configured")

    def _row_for(self, position: int) -> int:
        if position < 0:
            raise IndexError(f"Invalid record position: {position}")
        if position < len(self._rows):
            return self._rows[position]
        # Positions never seen by this store are addressed directly
        return position

    def _row_range(self, row: int) -> str:
        sheet_row = row + ROW_OFFSET
        return f"{self.sheet_name}!{FIRST_COLUMN}{sheet_row}:{LAST_COLUMN}{sheet_row}"

    async def _write_row(self, row: int, record: ComponentRecord) -> ComponentRecord:
        written = record.model_copy(
            update={
                "status": record.status or DEFAULT_STATUS,
                "last_updated": self.clock.today().isoformat(),
            }
        )
        await self._request(
            "PUT",
            self._row_range(row),
            params={"valueInputOption": "RAW"},
            body={"values": [written.to_row()]},
        )
        return written

    async def _request(
        self,
        method: str,
        a1_range: str,
        *,
        suffix: str = "",
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}/{quote(self.sheet_id, safe='')}/values/{quote(a1_range, safe='!:')}{suffix}"
        query = dict(params or {})
        query["key"] = self.api_key

        logger.info(f"{method} {a1_range}{suffix}")
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.request(method, url, params=query, json=body)
        except httpx.HTTPError as e:
            logger.error(f"{method} {a1_range}{suffix} failed: {e}")
            raise TransportError(f"Request to Google Sheets failed: {e}") from e

        if not response.is_success:
            logger.error(f"{method} {a1_range}{suffix} returned HTTP {response.status_code}")
            raise TransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _parse_values(response: httpx.Response) -> list[Any]:
        """Pull the "values" rows out of a response; anything malformed means no rows."""
        try:
            data = response.json()
        except ValueError:
            logger.warning("Sheets response was not JSON; treating as empty")
            return []

        if not isinstance(data, dict):
            return []
        values = data.get("values")
        return values if isinstance(values, list) else []
