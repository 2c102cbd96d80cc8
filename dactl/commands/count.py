"""Komenda: dactl count — liczba wystąpień słów w artykule."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from dactl.commands.show import add_source_arguments, load_or_exit
from game import GameState, normalize_guess

console = Console()


def run(args: argparse.Namespace) -> None:
    state = GameState()
    canonical = load_or_exit(state, args)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("SŁOWO", style="bold cyan", no_wrap=True)
    table.add_column("WYSTĄPIENIA", justify="right", no_wrap=True)

    for word in args.words:
        if not normalize_guess(word):
            continue
        n = state.count_occurrences(word) or 0
        table.add_row(Text(normalize_guess(word)), f"[green]{n}[/green]" if n else "[dim]0[/dim]")

    console.print(Text.assemble("Artykuł: ", (canonical, "bold")))
    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "count",
        help="Liczy wystąpienia słów w artykule (tytuł + treść).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Liczy wystąpienia podanych słów w artykule — w tytule i całej treści,
łącznie z zagnieżdżonymi listami. Porównanie bez rozróżniania wielkości liter.

Przykłady:
  dactl count "Rust (programming language)" rust memory
  dactl count Kraków --lang pl miasto Wisła
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "words",
        metavar="SŁOWO",
        nargs="+",
        help="Słowa do policzenia.",
    )
    p.set_defaults(func=run)
