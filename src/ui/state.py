from dataclasses import dataclass

from src.components.catalog import FilterInput


@dataclass
class AppState:
    category: str | None = None
    status: str | None = None
    search: str = ""

    def as_filter(self) -> FilterInput:
        return FilterInput(
            category=self.category or None,
            status=self.status or None,
            search=self.search,
        )

    def reset_filters(self) -> None:
        self.category = None
        self.status = None
        self.search = ""
