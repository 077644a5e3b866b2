from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from src.adapters.clock import SystemClock
from src.adapters.sheets import SheetsRecordStore
from src.app_shell.admin.catalog_controller import CatalogController
from src.app_shell.config import setup_message
from src.components.catalog import RecordCache
from src.core.ports.store import RecordStorePort
from src.rules.models import Rules


@dataclass
class ServiceContext:
    store: RecordStorePort
    cache: RecordCache
    controller: CatalogController
    rules: Rules
    clock: Any = None # For testing/injection

    @classmethod
    def create(
        cls,
        rules: Rules,
        env: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ServiceContext:
        env = os.environ if env is None else env
        clock = SystemClock()

        store = SheetsRecordStore.from_rules(rules.sheet, env, clock=clock, transport=transport)
        cache = RecordCache()
        controller = CatalogController(
            store,
            cache,
            preview_length=rules.catalog.preview_length,
            examples_preview_length=rules.catalog.examples_preview_length,
            setup_message=setup_message(rules),
        )

        return cls(
            store=store,
            cache=cache,
            controller=controller,
            rules=rules,
            clock=clock,
        )

    def category_options(self) -> list[str]:
        """Configured categories first, then any others found in the sheet."""
        return list(dict.fromkeys([*self.rules.catalog.categories, *self.cache.categories()]))
