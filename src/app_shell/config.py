import logging
import os
import sys
from collections.abc import Mapping

from src.adapters.sheets import is_configured_value, resolve_sheet_id
from src.rules.models import Rules

logger = logging.getLogger(__name__)

SETUP_MESSAGE = (
    "Google Sheets is not configured. Set {api_key_env} to an API key and "
    "{sheet_id_env} (or sheet.sheet_id in rules.yaml) to the spreadsheet ID, "
    "then restart."
)


def missing_sheet_settings(rules: Rules, env: Mapping[str, str] | None = None) -> list[str]:
    """
    List the store settings that are unset or still placeholders.
    """
    env = os.environ if env is None else env
    sheet = rules.sheet
    missing = []

    if not is_configured_value(env.get(sheet.api_key_env)):
        missing.append(sheet.api_key_env)
    if not is_configured_value(resolve_sheet_id(sheet, env)):
        missing.append(sheet.sheet_id_env)
    if not sheet.sheet_name.strip():
        missing.append("sheet.sheet_name")
    if not sheet.range.strip():
        missing.append("sheet.range")

    return missing


def setup_message(rules: Rules) -> str:
    return SETUP_MESSAGE.format(
        api_key_env=rules.sheet.api_key_env,
        sheet_id_env=rules.sheet.sheet_id_env,
    )


def validate_ops_rules(rules: Rules, env: Mapping[str, str] | None = None) -> None:
    """
    Validate operational requirements before startup.
    """
    env = os.environ if env is None else env

    missing = [name for name in rules.ops.required_env if name not in env]
    if missing:
        print(
            f"CRITICAL: Missing required environment variables: {', '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)

    logger.info("Configuration validated.")
