import flet as ft

from src.app_shell.admin.catalog_controller import FORM_FIELDS, Notice
from src.domain.entities import COLUMN_HEADERS, FIELD_NAMES
from src.ui.components.component_card import ComponentCard, EmptyStateCard
from src.ui.context import ServiceContext
from src.ui.state import AppState

ALL = "__all__"
FIELD_LABELS = dict(zip(FIELD_NAMES, COLUMN_HEADERS, strict=True))
MULTILINE_FIELDS = {
    "usage_guidelines",
    "content_guidelines",
    "voice_and_tone",
    "dos",
    "donts",
    "content_examples",
    "character_limits",
    "accessibility_notes",
}
CONFIRM_DELETE_TEXT = (
    "Are you sure you want to delete this component? This action cannot be undone."
)


def _options(values: list[str], all_label: str) -> list[ft.dropdown.Option]:
    return [ft.dropdown.Option(ALL, all_label)] + [ft.dropdown.Option(v) for v in values]


def ConfigErrorContent(message: str) -> ft.Control:
    return ft.Container(
        content=ft.Column([
            ft.Text("Configuration required", size=24, weight=ft.FontWeight.BOLD, color="error"),
            ft.Text(message, size=16),
        ]),
        padding=40,
    )


def CatalogContent(page: ft.Page, ctx: ServiceContext, state: AppState) -> ft.Control:
    controller = ctx.controller
    if controller.config_error:
        return ConfigErrorContent(controller.config_error)

    status_values = ctx.rules.catalog.status_values

    # --- Notices ---

    def show_notices() -> None:
        notices: list[Notice] = controller.drain_notices()
        for notice in notices:
            page.open(ft.SnackBar(
                ft.Text(notice.text),
                bgcolor="error" if notice.level == "error" else "secondary",
                duration=5000,
            ))

    # --- Grid ---

    grid = ft.GridView(
        expand=True,
        max_extent=380,
        child_aspect_ratio=0.9,
        spacing=16,
        run_spacing=16,
    )
    empty_state = ft.Container(visible=False, padding=20)
    loading = ft.ProgressRing(visible=False, width=24, height=24)

    def populate() -> None:
        category_dd.options = _options(ctx.category_options(), "All Categories")
        cards = controller.cards(state.as_filter())
        grid.controls = [ComponentCard(card, on_click=edit_clicked) for card in cards]
        grid.visible = bool(cards)
        empty_state.content = EmptyStateCard(on_add=add_clicked)
        empty_state.visible = not cards
        loading.visible = controller.loading

    def render() -> None:
        populate()
        page.update()

    # --- Filters ---

    def category_changed(e: ft.ControlEvent) -> None:
        state.category = None if e.control.value == ALL else e.control.value
        render()

    def status_changed(e: ft.ControlEvent) -> None:
        state.status = None if e.control.value == ALL else e.control.value
        render()

    def search_changed(e: ft.ControlEvent) -> None:
        state.search = e.control.value or ""
        render()

    category_dd = ft.Dropdown(
        label="Category",
        value=ALL,
        options=_options(ctx.category_options(), "All Categories"),
        on_change=category_changed,
        width=200,
    )
    status_dd = ft.Dropdown(
        label="Status",
        value=ALL,
        options=_options(status_values, "All Statuses"),
        on_change=status_changed,
        width=180,
    )
    search_field = ft.TextField(
        label="Search components...",
        prefix_icon=ft.Icons.SEARCH,
        on_change=search_changed,
        expand=True,
    )

    # --- Modal form ---

    fields: dict[str, ft.TextField | ft.Dropdown] = {}
    for name in FORM_FIELDS:
        if name == "status":
            fields[name] = ft.Dropdown(
                label=FIELD_LABELS[name],
                options=[ft.dropdown.Option(v) for v in status_values],
            )
        else:
            fields[name] = ft.TextField(
                label=FIELD_LABELS[name],
                multiline=name in MULTILINE_FIELDS,
                min_lines=2 if name in MULTILINE_FIELDS else 1,
            )

    def read_form() -> dict[str, str]:
        return {name: control.value or "" for name, control in fields.items()}

    def fill_form() -> None:
        for name, control in fields.items():
            control.value = controller.modal.form.get(name, "")

    dialog_title = ft.Text()

    async def save_clicked(_: ft.ControlEvent) -> None:
        saved = await controller.submit(read_form())
        if saved:
            if not controller.modal.is_open:
                page.close(dialog)
            render()
        show_notices()

    def delete_clicked(_: ft.ControlEvent) -> None:
        dialog.actions = confirm_actions
        page.update()

    def keep_clicked(_: ft.ControlEvent) -> None:
        dialog.actions = form_actions
        page.update()

    async def confirm_delete_clicked(_: ft.ControlEvent) -> None:
        deleted = await controller.delete(confirmed=True)
        if deleted:
            if not controller.modal.is_open:
                page.close(dialog)
            render()
        else:
            dialog.actions = form_actions
            page.update()
        show_notices()

    def close_modal(_: ft.ControlEvent | None = None) -> None:
        controller.close()
        page.close(dialog)

    def dialog_dismissed(_: ft.ControlEvent) -> None:
        # Outside click; the form is discarded
        if controller.modal.is_open:
            controller.close()

    delete_button = ft.TextButton(
        "Delete",
        icon=ft.Icons.DELETE,
        icon_color="error",
        on_click=delete_clicked,
    )
    form_actions: list[ft.Control] = [
        delete_button,
        ft.TextButton("Cancel", on_click=close_modal),
        ft.ElevatedButton("Save Component", icon=ft.Icons.SAVE, on_click=save_clicked),
    ]
    confirm_actions: list[ft.Control] = [
        ft.Text(CONFIRM_DELETE_TEXT, color="error"),
        ft.TextButton("Keep", on_click=keep_clicked),
        ft.ElevatedButton(
            "Delete",
            icon=ft.Icons.DELETE_FOREVER,
            on_click=confirm_delete_clicked,
            bgcolor="error",
            color="onError",
        ),
    ]

    dialog = ft.AlertDialog(
        modal=False,
        title=ft.Row([
            dialog_title,
            ft.IconButton(ft.Icons.CLOSE, on_click=close_modal),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        content=ft.Container(
            content=ft.Column(list(fields.values()), scroll=ft.ScrollMode.AUTO, spacing=12),
            width=640,
        ),
        actions=form_actions,
        on_dismiss=dialog_dismissed,
    )

    def open_modal() -> None:
        dialog_title.value = controller.modal.title
        delete_button.visible = controller.modal.show_delete
        dialog.actions = form_actions
        fill_form()
        page.open(dialog)

    def add_clicked(_: ft.ControlEvent) -> None:
        controller.open_create()
        open_modal()

    def edit_clicked(e: ft.ControlEvent) -> None:
        controller.open_edit(e.control.data)
        open_modal()

    def keyboard_event(e: ft.KeyboardEvent) -> None:
        if e.key == "Escape" and controller.modal.is_open:
            close_modal()

    page.on_keyboard_event = keyboard_event

    # --- Header ---

    async def refresh_clicked(_: ft.ControlEvent) -> None:
        loading.visible = True
        page.update()
        await controller.refresh()
        render()
        show_notices()

    header = ft.Row([
        ft.Text("Design System Components", size=24, weight=ft.FontWeight.BOLD, color="primary"),
        ft.Row([
            loading,
            ft.OutlinedButton("Refresh", icon=ft.Icons.REFRESH, on_click=refresh_clicked),
            ft.ElevatedButton(
                "Add Component",
                icon=ft.Icons.ADD,
                on_click=add_clicked,
                bgcolor="primary",
                color="onPrimary",
            ),
        ]),
    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

    populate()
    show_notices()

    return ft.Container(
        content=ft.Column([
            header,
            ft.Row([category_dd, status_dd, search_field]),
            ft.Divider(),
            empty_state,
            grid,
        ], expand=True),
        padding=20,
        expand=True,
    )
