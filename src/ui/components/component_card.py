from typing import Any

import flet as ft

from src.components.catalog import RecordCard
from src.ui.theme import AppTheme


def _badge(text: str, color: str) -> ft.Container:
    return ft.Container(
        content=ft.Text(text, size=11, weight=ft.FontWeight.BOLD, color="#ffffff"),
        bgcolor=color,
        border_radius=ft.border_radius.all(10),
        padding=ft.padding.symmetric(horizontal=8, vertical=2),
    )


def _section(label: str, text: str, italic: bool = False) -> ft.Column:
    return ft.Column(
        [
            ft.Text(label.upper(), size=11, weight=ft.FontWeight.BOLD, color="secondary"),
            ft.Text(text, size=13, italic=italic),
        ],
        spacing=2,
    )


class HoverCard(ft.Container): # type: ignore
    """
    Card shell with a lift-on-hover micro-interaction.
    """
    def __init__(
        self,
        content: ft.Control,
        padding: float = 20,
        on_click: Any | None = None,
        data: Any | None = None,
    ):
        super().__init__(
            content=content,
            padding=padding,
            border_radius=ft.border_radius.all(12),
            bgcolor="surfaceVariant",
            animate=ft.animation.Animation(200, ft.AnimationCurve.EASE_OUT),
            on_hover=self._on_hover,
            on_click=on_click,
            data=data,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=10,
                color="#1A000000",
                offset=ft.Offset(0, 4),
            )
        )

    def _on_hover(self, e: ft.HoverEvent) -> None:
        lifted = e.data == "true"
        self.shadow.blur_radius = 20 if lifted else 10
        self.shadow.offset = ft.Offset(0, 8 if lifted else 4)
        self.shadow.color = "#26000000" if lifted else "#1A000000"
        self.update()


class ComponentCard(HoverCard):
    """Summary card for one component record. Clicking opens the editor."""

    def __init__(self, card: RecordCard, on_click: Any | None = None):
        sections: list[ft.Control] = [
            _section("Usage Guidelines", card.usage_preview),
            _section("Content Guidelines", card.content_preview),
        ]
        if card.examples_preview is not None:
            sections.append(_section("Examples", card.examples_preview, italic=True))

        super().__init__(
            content=ft.Column(
                [
                    ft.Text(card.name, size=18, weight=ft.FontWeight.BOLD),
                    ft.Row(
                        [
                            _badge(card.status, AppTheme.status_color(card.status_class)),
                            _badge(card.category, AppTheme.category_color),
                        ],
                        spacing=6,
                    ),
                    ft.Divider(height=8),
                    *sections,
                ],
                spacing=8,
            ),
            on_click=on_click,
            data=card.position,
        )
        self.card = card


class EmptyStateCard(HoverCard):
    """Shown in place of the grid when no record matches."""

    def __init__(self, on_add: Any | None = None):
        super().__init__(
            content=ft.Column(
                [
                    ft.Text("No components found", size=18, weight=ft.FontWeight.BOLD),
                    ft.Text("Try adjusting your filters or add a new component."),
                    ft.ElevatedButton(
                        "Add Component",
                        icon=ft.Icons.ADD,
                        on_click=on_add,
                        bgcolor="primary",
                        color="onPrimary",
                    ),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=12,
            ),
            padding=40,
        )
