import httpx

from src.app_shell.admin.catalog_controller import CatalogController
from src.components.catalog import FilterInput
from src.domain.entities import ComponentRecord
from src.ui.context import ServiceContext
from src.ui.state import AppState
from src.ui.theme import AppTheme


def test_app_theme_modes():
    """Test that AppTheme returns correct color schemes for modes."""
    light = AppTheme.light_theme()
    assert light.color_scheme.primary == AppTheme.primary_light

    dark = AppTheme.dark_theme()
    assert dark.color_scheme.primary == AppTheme.primary_dark


def test_status_colors_fall_back_to_draft():
    assert AppTheme.status_color("approved") == AppTheme.status_colors["approved"]
    assert AppTheme.status_color("archived") == AppTheme.status_colors["draft"]


def test_app_state_filters():
    state = AppState()
    assert state.as_filter() == FilterInput()

    state.category = "Input"
    state.status = ""
    state.search = "btn"
    assert state.as_filter() == FilterInput(category="Input", status=None, search="btn")

    state.reset_filters()
    assert state.as_filter() == FilterInput()


def test_service_context_wires_controller(rules, env):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    ctx = ServiceContext.create(rules, env, transport=transport)

    assert isinstance(ctx.controller, CatalogController)
    assert ctx.controller.store is ctx.store
    assert ctx.controller.cache is ctx.cache
    assert ctx.controller.preview_length == rules.catalog.preview_length


def test_category_options_merge_rules_and_sheet(rules, env):
    ctx = ServiceContext.create(rules, env)
    ctx.cache.replace_all([
        ComponentRecord(name="A", category="Input"),
        ComponentRecord(name="B", category="Charts"),
    ])

    options = ctx.category_options()

    assert options[: len(rules.catalog.categories)] == rules.catalog.categories
    assert options.count("Input") == 1
    assert options[-1] == "Charts"
