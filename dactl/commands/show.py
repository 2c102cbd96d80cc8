"""Komenda: dactl show — pobiera artykuł i wyświetla drzewo jego sekcji."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape
from rich.text import Text

from article_model import Heading, OrderedList, Paragraph, Section, Token, UnorderedList, Word
from dactl._loading import load_article, load_file, load_random_article
from game import GameState, render_tokens
from wiki_api import FetchError, load_settings

console = Console()

KIND_STYLE: dict[str, str] = {
    "nagłówek": "bold cyan",
    "akapit":   "",
    "lista":    "yellow",
    "lista nr": "yellow",
}


# ---------------------------------------------------------------------------
# Ładowanie artykułu (wspólne dla komend)
# ---------------------------------------------------------------------------

def add_source_arguments(p: argparse.ArgumentParser, title_required: bool = True) -> None:
    p.add_argument(
        "title",
        metavar="TYTUŁ",
        nargs=None if title_required else "?",
        default=None,
        help="Tytuł artykułu w Wikipedii.",
    )
    p.add_argument(
        "--lang",
        metavar="KOD",
        default=None,
        help="Kod języka Wikipedii (domyślnie: DACTL_LANGUAGE lub en).",
    )
    p.add_argument(
        "--file",
        metavar="PLIK.html",
        default=None,
        help="Wczytaj HTML artykułu z pliku zamiast z Wikipedii.",
    )


def load_or_exit(state: GameState, args: argparse.Namespace) -> str:
    """Ładuje artykuł wg argumentów; przy błędzie wypisuje komunikat i kończy (1)."""
    if args.file:
        path = Path(args.file)
        if not path.exists():
            console.print(f"[red]Plik nie istnieje:[/red] {path}")
            raise SystemExit(1)
        try:
            return load_file(state, path, args.title)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Błąd odczytu pliku[/red] {escape(str(path))}: {escape(str(e))}")
            raise SystemExit(1)

    try:
        language = args.lang or load_settings().language
        if args.title:
            return load_article(state, language, args.title)
        return load_random_article(state, language)
    except (FetchError, ValueError) as e:
        console.print(f"[red]Błąd pobierania:[/red] {escape(str(e))}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _word_count(tokens: list[Token]) -> int:
    return sum(1 for t in tokens if isinstance(t, Word))


def _rows(sections: list[Section], depth: int = 0) -> Iterator[tuple[int, str, str, list[Token]]]:
    """(głębokość, rodzaj, poziom/numer, tokeny) — rekurencyjnie po listach."""
    for section in sections:
        match section:
            case Heading(level=level, tokens=tokens):
                yield depth, "nagłówek", str(level), tokens
            case Paragraph(tokens=tokens):
                yield depth, "akapit", "", tokens
            case UnorderedList(items=items):
                for item in items:
                    yield depth, "lista", "•", []
                    yield from _rows(item, depth + 1)
            case OrderedList(items=items):
                for i, item in enumerate(items, start=1):
                    yield depth, "lista nr", f"{i}.", []
                    yield from _rows(item, depth + 1)


def _show_table(state: GameState, reveal: bool) -> None:
    article = state.article
    if article is None or not article.content:
        console.print("[yellow]Brak sekcji.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("POZ.",   justify="right", no_wrap=True, style="dim")
    table.add_column("SŁOWA",  justify="right", no_wrap=True)
    table.add_column("TEKST",  no_wrap=False, max_width=90)

    rows = 0
    for depth, kind, level, tokens in _rows(article.content):
        text = "".join(t.text for t in tokens) if reveal else render_tokens(state, tokens)
        indent = "  " * depth
        table.add_row(
            Text(indent + kind, style=KIND_STYLE[kind]),
            level,
            str(_word_count(tokens)) if tokens else "",
            Text(text[:200]),
        )
        rows += 1

    console.print()
    console.print(table)
    console.print(f"  [dim]{rows} wierszy[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    state = GameState()
    load_or_exit(state, args)
    article = state.article
    if article is None:
        console.print("[yellow]Brak artykułu.[/yellow]")
        return

    title = "".join(t.text for t in article.title) if args.reveal else render_tokens(state, article.title)
    console.print(Text.assemble("Artykuł: ", (title, "bold")))
    _show_table(state, args.reveal)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Pobiera artykuł i wyświetla jego strukturę (sekcje, tokeny).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera artykuł z Wikipedii, parsuje go i wyświetla drzewo sekcji:
nagłówki (z poziomem), akapity i listy (z zagnieżdżeniem).

Bez TYTUŁU ładowany jest losowy artykuł.
Domyślnie słowa są zakryte ('_' za każdą literę); --reveal pokazuje tekst.

Przykłady:
  dactl show "Rust (programming language)"
  dactl show Kraków --lang pl --reveal
  dactl show --file artykul.html --reveal
        """,
    )
    add_source_arguments(p, title_required=False)
    p.add_argument(
        "--reveal",
        action="store_true",
        help="Pokaż tekst bez zakrywania słów.",
    )
    p.set_defaults(func=run)
