"""Entry point for the tabdeck CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .log import logger


def _page_arg(value: str) -> int | str:
    """Page identifiers are indices when numeric, tab keys otherwise."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabdeck",
        description="Browse a list of tabs with lazy pane rendering.",
    )
    parser.add_argument(
        "tabs_file",
        nargs="?",
        type=Path,
        help="YAML file with a list of tabs (title, key, content). Demo tabs if omitted.",
    )
    parser.add_argument(
        "--initial-page",
        type=_page_arg,
        default=None,
        help="Tab index or key to start on",
    )
    parser.add_argument(
        "--page",
        type=_page_arg,
        default=None,
        help="Pin the active tab (controlled mode); clicks only report intent",
    )
    parser.add_argument(
        "--prerender",
        default=None,
        help='Sibling tabs to keep mounted on each side, or "all"',
    )
    parser.add_argument(
        "--destroy-inactive",
        action="store_true",
        default=None,
        help="Unmount panes that leave the prerender band",
    )
    parser.add_argument(
        "--tab-bar-position",
        choices=["top", "bottom", "left", "right"],
        default=None,
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        default=None,
        help="Preferences file (default: ~/.tabdeck/preferences.yaml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    from .app import TabDeckApp, load_tabs
    from .core.render_window import normalize_radius
    from .preferences import load_preferences

    prefs = load_preferences(args.prefs)

    tabs = content = None
    if args.tabs_file is not None:
        tabs, content = load_tabs(args.tabs_file)
        logger.debug("loaded %d tabs from %s", len(tabs), args.tabs_file)

    overrides: dict = {}
    if args.initial_page is not None:
        overrides["initial_page"] = args.initial_page
    if args.page is not None:
        overrides["page"] = args.page
    if args.prerender is not None:
        overrides["prerendering_siblings_number"] = normalize_radius(args.prerender)
    if args.destroy_inactive:
        overrides["destroy_inactive_tab"] = True
    if args.tab_bar_position is not None:
        overrides["tab_bar_position"] = args.tab_bar_position

    TabDeckApp(tabs, content, prefs=prefs, **overrides).run()


if __name__ == "__main__":
    main()
