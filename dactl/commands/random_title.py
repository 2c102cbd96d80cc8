"""Komenda: dactl random — tytuł losowego artykułu."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from wiki_api import FetchError, fetch_random_title, load_settings

console = Console()


def run(args: argparse.Namespace) -> None:
    try:
        language = args.lang or load_settings().language
        title = fetch_random_title(language)
    except (FetchError, ValueError) as e:
        console.print(f"[red]Błąd pobierania:[/red] {escape(str(e))}")
        raise SystemExit(1)
    console.print(Text(title))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "random",
        help="Wypisuje tytuł losowego artykułu.",
    )
    p.add_argument(
        "--lang",
        metavar="KOD",
        default=None,
        help="Kod języka Wikipedii (domyślnie: DACTL_LANGUAGE lub en).",
    )
    p.set_defaults(func=run)
