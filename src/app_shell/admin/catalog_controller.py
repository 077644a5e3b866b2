"""
Catalog controller - modal form state machine for component records.

States:
- closed
- creating            (add action; form cleared, delete hidden)
- editing(position)   (card selected; form populated, delete shown)

Transitions:
- creating|editing -> closed on cancel, close, outside click or Escape
- creating -> closed when append succeeds (record appended to the cache)
- editing(p) -> closed when update succeeds (cache entry p replaced)
- editing(p) -> closed when a confirmed delete succeeds (cache entry p removed)
- any failure keeps the modal open with the form as entered

Only one save, delete or refresh runs at a time; requests that arrive while
one is in flight are refused.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from src.components.catalog import FilterInput, RecordCache, RecordCard, build_cards
from src.core.ports.store import ConfigurationError, RecordStorePort, StoreError
from src.domain.entities import DEFAULT_STATUS, FIELD_NAMES, ComponentRecord

logger = logging.getLogger(__name__)

NoticeLevel = Literal["success", "error"]

# Last Updated is stamped by the store, never typed in
FORM_FIELDS: tuple[str, ...] = tuple(name for name in FIELD_NAMES if name != "last_updated")

LOAD_ERROR = "Error loading components. Please check your API configuration."
SAVE_ERROR = "Error saving component. Please try again."
DELETE_ERROR = "Error deleting component. Please try again."


class ModalMode(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    text: str


def empty_form() -> dict[str, str]:
    form = {name: "" for name in FORM_FIELDS}
    form["status"] = DEFAULT_STATUS
    return form


def form_from_record(record: ComponentRecord) -> dict[str, str]:
    form = {name: getattr(record, name) for name in FORM_FIELDS}
    form["status"] = form["status"] or DEFAULT_STATUS
    return form


@dataclass
class ModalState:
    mode: ModalMode = ModalMode.CLOSED
    position: int | None = None
    form: dict[str, str] = field(default_factory=empty_form)

    @property
    def is_open(self) -> bool:
        return self.mode is not ModalMode.CLOSED

    @property
    def show_delete(self) -> bool:
        return self.mode is ModalMode.EDITING

    @property
    def title(self) -> str:
        return "Edit Component" if self.mode is ModalMode.EDITING else "Add New Component"


class CatalogController:
    def __init__(
        self,
        store: RecordStorePort,
        cache: RecordCache | None = None,
        *,
        preview_length: int = 120,
        examples_preview_length: int = 100,
        setup_message: str | None = None,
    ) -> None:
        self.store = store
        self.cache = cache if cache is not None else RecordCache()
        self.preview_length = preview_length
        self.examples_preview_length = examples_preview_length
        self.setup_message = setup_message

        self.modal = ModalState()
        self.notices: list[Notice] = []
        self.loading = False
        self.config_error: str | None = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    # --- Loading ---

    async def start(self) -> None:
        """Initial load. A configuration problem becomes a static message."""
        self.loading = True
        try:
            await self._reload()
        except ConfigurationError as e:
            logger.error(f"Error initializing app: {e}")
            self.config_error = self.setup_message or str(e)
        except StoreError as e:
            logger.error(f"Error initializing app: {e}")
            self._notify("error", LOAD_ERROR)
        finally:
            self.loading = False

    async def refresh(self) -> bool:
        if not self._acquire("refresh"):
            return False
        self.loading = True
        try:
            await self._reload()
        except StoreError as e:
            logger.error(f"Error refreshing components: {e}")
            self._notify("error", LOAD_ERROR)
            return False
        finally:
            self.loading = False
            self._busy = False

        self.config_error = None
        self._notify("success", "Components refreshed successfully!")
        return True

    async def _reload(self) -> None:
        self.cache.replace_all(await self.store.load_all())

    # --- Rendering ---

    def cards(self, filters: FilterInput | None = None) -> list[RecordCard]:
        return build_cards(
            self.cache,
            filters or FilterInput(),
            preview_length=self.preview_length,
            examples_preview_length=self.examples_preview_length,
        )

    def drain_notices(self) -> list[Notice]:
        notices, self.notices = self.notices, []
        return notices

    # --- Modal transitions ---

    def open_create(self) -> None:
        self.modal = ModalState(mode=ModalMode.CREATING)

    def open_edit(self, position: int) -> None:
        record = self.cache[position]
        self.modal = ModalState(
            mode=ModalMode.EDITING,
            position=position,
            form=form_from_record(record),
        )

    def close(self) -> None:
        """Cancel, close button, outside click and Escape all land here."""
        self.modal = ModalState()

    def set_field(self, name: str, value: str) -> None:
        if name not in FORM_FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        self.modal.form[name] = value

    # --- Actions ---

    async def submit(self, form: Mapping[str, str] | None = None) -> bool:
        """
        Save the modal form. Creating appends; editing overwrites in place.

        Returns:
            True when saved; False otherwise. The modal closes unless
            another form was opened while the save was in flight.
        """
        if not self.modal.is_open:
            return False
        if form is not None:
            for name, value in form.items():
                self.set_field(name, value)
        if not self._acquire("save"):
            return False

        modal = self.modal
        record = ComponentRecord.model_validate(dict(modal.form))
        is_new = modal.mode is ModalMode.CREATING
        try:
            if is_new:
                written = await self.store.append(record)
                self.cache.append(written)
            else:
                position = self._editing_position()
                written = await self.store.update(position, record)
                self.cache.update_at(position, written)
        except StoreError as e:
            logger.error(f"Error saving component: {e}")
            self._notify("error", SAVE_ERROR)
            return False
        finally:
            self._busy = False

        self._close_if_current(modal)
        self._notify(
            "success",
            "Component created successfully!" if is_new else "Component updated successfully!",
        )
        return True

    async def delete(self, confirmed: bool) -> bool:
        """Clear the edited record's row. Does nothing unless confirmed."""
        if self.modal.mode is not ModalMode.EDITING or not confirmed:
            return False
        if not self._acquire("delete"):
            return False

        modal = self.modal
        position = self._editing_position()
        try:
            await self.store.clear(position)
        except StoreError as e:
            logger.error(f"Error deleting component: {e}")
            self._notify("error", DELETE_ERROR)
            return False
        finally:
            self._busy = False

        self.cache.remove_at(position)
        self._close_if_current(modal)
        self._shift_after_remove(position)
        self._notify("success", "Component deleted successfully!")
        return True

    # --- Internals ---

    def _editing_position(self) -> int:
        if self.modal.position is None:
            raise RuntimeError("No record selected for editing")
        return self.modal.position

    def _close_if_current(self, modal: ModalState) -> None:
        # Another form may have been opened while the request was in flight
        if self.modal is modal:
            self.close()

    def _shift_after_remove(self, removed: int) -> None:
        current = self.modal.position
        if current is None:
            return
        if current == removed:
            self.close()
        elif current > removed:
            self.modal.position = current - 1

    def _acquire(self, action: str) -> bool:
        if self._busy:
            logger.warning(f"Ignoring {action}: another request is still in flight")
            return False
        self._busy = True
        return True

    def _notify(self, level: NoticeLevel, text: str) -> None:
        self.notices.append(Notice(level=level, text=text))
