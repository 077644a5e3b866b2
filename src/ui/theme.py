import flet as ft


class AppTheme:
    """
    Centralized theme configuration for the component catalog.
    Neutral greys with an indigo accent; status badges use traffic colours.
    """

    font_family = "Inter"

    # Colors - Light
    primary_light = "#4f46e5" # Indigo
    on_primary_light = "#ffffff"
    secondary_light = "#0ea5e9" # Sky
    background_light = "#f5f5f7"
    surface_light = "#ffffff"
    error_light = "#dc2626"

    # Colors - Dark
    primary_dark = "#818cf8"
    on_primary_dark = "#111827"
    secondary_dark = "#38bdf8"
    background_dark = "#111827"
    surface_dark = "#1f2937"

    # Status badges, keyed by lower-cased status
    status_colors = {
        "draft": "#9ca3af",
        "review": "#f59e0b",
        "approved": "#16a34a",
    }
    category_color = "#6366f1"

    @classmethod
    def status_color(cls, status_class: str) -> str:
        return cls.status_colors.get(status_class, cls.status_colors["draft"])

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                on_primary=cls.on_primary_light,
                secondary=cls.secondary_light,
                background=cls.background_light,
                surface=cls.surface_light,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                on_primary=cls.on_primary_dark,
                secondary=cls.secondary_dark,
                background=cls.background_dark,
                surface=cls.surface_dark,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )
