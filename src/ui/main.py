import logging
import os
from pathlib import Path

import flet as ft

from src.app_shell.admin.catalog_admin import CatalogContent
from src.app_shell.config import validate_ops_rules
from src.rules.loader import load_rules
from src.ui.context import ServiceContext
from src.ui.state import AppState
from src.ui.theme import AppTheme

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Configuration from environment (with sensible defaults for local dev)
RULES_PATH = os.environ.get("DSCMS_RULES_PATH", "rules.yaml")
DEFAULT_PORT = int(os.environ.get("DSCMS_PORT", "8550"))


async def main(page: ft.Page) -> None:
    page.title = "Design System Content Manager"

    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.LIGHT

    # 1. Load Rules
    rules_path = Path(RULES_PATH)
    try:
        rules = load_rules(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Rules load failed: {e}")
        page.add(ft.Text(f"Error: {e}", color="red", size=20))
        return
    logger.info(f"Rules loaded from {rules_path}")

    # 2. Validate Production Config
    validate_ops_rules(rules)

    # 3. Create Context
    ctx = ServiceContext.create(rules)
    state = AppState()

    # 4. Initial load behind a spinner
    page.add(ft.Row([ft.ProgressRing(), ft.Text("Loading components...")]))
    page.update()
    await ctx.controller.start()

    page.controls.clear()
    page.add(CatalogContent(page, ctx, state))
    page.update()


def run(port: int = DEFAULT_PORT) -> None:
    ft.app(target=main, view=ft.AppView.WEB_BROWSER, port=port)


if __name__ == "__main__":
    run()
