import argparse
import asyncio
import logging
import sys
from pathlib import Path

from src.app_shell.config import missing_sheet_settings, setup_message
from src.components.catalog import FilterInput, filter_records
from src.components.tokens import load_tokens, render_color_palette, render_type_scale
from src.core.ports.store import StoreError
from src.rules.loader import load_rules
from src.rules.models import Rules
from src.ui.context import ServiceContext

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"

TOKEN_RENDERERS = {
    "colors": render_color_palette,
    "typography": render_type_scale,
}


def get_rules(path: str) -> Rules:
    rules_path = Path(path)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)
    return load_rules(rules_path)


def handle_check(rules: Rules, _: argparse.Namespace) -> None:
    missing = missing_sheet_settings(rules)
    if missing:
        print(f"Missing: {', '.join(missing)}")
        print(setup_message(rules))
        sys.exit(1)
    print("Configuration OK.")


async def _load(ctx: ServiceContext) -> None:
    ctx.cache.replace_all(await ctx.store.load_all())


def handle_list(rules: Rules, args: argparse.Namespace) -> None:
    ctx = ServiceContext.create(rules)
    try:
        asyncio.run(_load(ctx))
    except StoreError as e:
        logger.error(f"Could not load components: {e}")
        sys.exit(1)

    inp = FilterInput(category=args.category, status=args.status, search=args.search)
    for record in filter_records(ctx.cache, inp):
        position = ctx.cache.position_of(record)
        print(f"{position:>4}  {record.name}  [{record.category or '-'}]  {record.status or '-'}")


def handle_tokens(rules: Rules, args: argparse.Namespace) -> None:
    tokens_path = Path(args.tokens or rules.tokens.path)
    try:
        tokens = load_tokens(tokens_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    output = TOKEN_RENDERERS[args.kind](tokens)
    if args.out:
        Path(args.out).write_text(output)
        print(f"Wrote {args.kind} to {args.out}")
    else:
        print(output)


def handle_serve(_: Rules, args: argparse.Namespace) -> None:
    from src.ui.main import run

    run(port=args.port)


def main() -> None:
    parser = argparse.ArgumentParser(description="Design System Content Manager CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check
    subparsers.add_parser("check", help="Verify the Google Sheets configuration")

    # list
    list_parser = subparsers.add_parser("list", help="List components from the sheet")
    list_parser.add_argument("--category", help="Exact category match")
    list_parser.add_argument("--status", help="Exact status match")
    list_parser.add_argument("--search", default="", help="Text in name or guidelines")

    # tokens
    tokens_parser = subparsers.add_parser("tokens", help="Render design tokens as HTML")
    tokens_parser.add_argument("kind", choices=sorted(TOKEN_RENDERERS))
    tokens_parser.add_argument("--tokens", help="Token file (defaults to tokens.path)")
    tokens_parser.add_argument("--out", help="Write HTML here instead of stdout")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the web UI")
    serve_parser.add_argument("--port", type=int, default=8550)

    args = parser.parse_args()
    rules = get_rules(args.rules)

    handlers = {
        "check": handle_check,
        "list": handle_list,
        "tokens": handle_tokens,
        "serve": handle_serve,
    }
    handlers[args.command](rules, args)


if __name__ == "__main__":
    main()
