"""
Komenda: dactl play — interaktywna gra w terminalu.

Każda linia wejścia to próba (słowo). Polecenia specjalne:
  !select SŁOWO   przełącza podświetlenie słowa (drugi raz → odznacza)
  !guesses        tabela prób z liczbą wystąpień
  !show           ponownie wyświetla artykuł
  !progress       procent odsłoniętych słów
  !quit           koniec gry
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from article_model import Token
from dactl.commands.show import add_source_arguments, load_or_exit
from game import GameState, TokenTreatment, mask_token, section_lines

console = Console()

PROMPT = "> "

TREATMENT_STYLE: dict[TokenTreatment, str] = {
    TokenTreatment.BLANK:     "dim",
    TokenTreatment.SHOW:      "",
    TokenTreatment.HIGHLIGHT: "black on cyan",
}


# ---------------------------------------------------------------------------
# Wyświetlanie
# ---------------------------------------------------------------------------

def styled_tokens(state: GameState, tokens: Iterable[Token], style: str = "") -> Text:
    text = Text(style=style)
    for token in tokens:
        treatment = state.token_treatment(token)
        text.append(mask_token(token, treatment), style=TREATMENT_STYLE[treatment])
    return text


def show_article(state: GameState) -> None:
    article = state.article
    if article is None:
        console.print("[yellow]Brak artykułu.[/yellow]")
        return

    console.print(styled_tokens(state, article.title, style="bold underline"))
    console.print()
    for line in section_lines(article.content):
        style = "bold" if line.kind == "heading" else ""
        if line.kind == "heading":
            console.print()
        console.print(Text(line.prefix) + styled_tokens(state, line.tokens, style=style))


def show_guesses(state: GameState) -> None:
    rows = state.guess_table()
    if not rows:
        console.print("[yellow]Brak prób.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("PRÓBA", no_wrap=True)
    table.add_column("WYSTĄPIENIA", justify="right", no_wrap=True)
    for guess, n in rows:
        style = "black on cyan" if guess == state.selected_guess else ("" if n else "dim")
        table.add_row(Text(guess, style=style), str(n))
    console.print(table)


# ---------------------------------------------------------------------------
# Pętla gry
# ---------------------------------------------------------------------------

def handle_line(state: GameState, line: str) -> bool:
    """Obsługuje jedną linię wejścia. Zwraca False, gdy gra ma się zakończyć."""
    line = line.strip()
    if not line:
        return True

    if line.startswith("!"):
        command, _, arg = line[1:].partition(" ")
        match command.lower():
            case "quit" | "q":
                return False
            case "select" | "s":
                selected = state.toggle_selection(arg)
                if selected is None:
                    console.print("[dim]Odznaczono.[/dim]")
                else:
                    console.print(Text.assemble("Podświetlono: ", (selected, "black on cyan")))
            case "guesses" | "g":
                show_guesses(state)
            case "show":
                show_article(state)
            case "progress" | "p":
                console.print(f"Odsłonięto [bold]{state.revealed_ratio():.0%}[/bold] słów.")
            case _:
                console.print(f"[yellow]Nieznane polecenie:[/yellow] !{command}")
        return True

    was_complete = state.title_complete()
    guess = state.register_guess(line)
    if guess is None:
        return True
    n = state.count_occurrences(guess) or 0
    console.print(Text.assemble((guess, "bold"), f": {n}", style="green" if n else "red"))

    if state.title_complete() and not was_complete:
        console.print("\n[bold green]Tytuł odgadnięty — artykuł odsłonięty![/bold green]\n")
        show_article(state)
        return False
    return True


def play_loop(state: GameState, lines: Iterable[str]) -> int:
    """Przetwarza linie wejścia aż do !quit, wygranej lub końca wejścia. Zwraca liczbę prób."""
    console.print(PROMPT, end="")
    for line in lines:
        if not handle_line(state, line):
            break
        console.print(PROMPT, end="")
    console.print()
    return len(state.guesses)


def run(args: argparse.Namespace) -> None:
    state = GameState()
    load_or_exit(state, args)

    for word in args.give or []:
        state.register_guess(word)

    show_article(state)
    console.print(
        "\n[dim]Wpisz słowo, aby je odgadnąć. "
        "!select SŁOWO, !guesses, !show, !progress, !quit[/dim]"
    )
    n = play_loop(state, sys.stdin)
    console.print(f"[dim]Koniec gry po {n} próbach.[/dim]")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "play",
        help="Interaktywna gra: odgadnij zakryty artykuł słowo po słowie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Ładuje artykuł, zakrywa wszystkie słowa i czyta próby ze standardowego
wejścia. Odgadnięcie wszystkich słów tytułu odsłania cały artykuł.

Bez TYTUŁU ładowany jest losowy artykuł.

Przykłady:
  dactl play
  dactl play "Rust (programming language)"
  dactl play Kraków --lang pl --give w i na
  dactl play --file artykul.html
        """,
    )
    add_source_arguments(p, title_required=False)
    p.add_argument(
        "--give",
        metavar="SŁOWO",
        nargs="+",
        default=None,
        help="Słowa odsłonięte na starcie (np. spójniki).",
    )
    p.set_defaults(func=run)
