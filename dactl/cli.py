"""
dactl — narzędzie CLI gry.

Użycie:
  dactl <komenda> [opcje]

Komendy:
  play     Interaktywna gra w terminalu (zgadywanie słów artykułu).
  show     Pobiera artykuł i wyświetla jego strukturę (sekcje, tokeny).
  count    Liczy wystąpienia słów w artykule.
  random   Wypisuje tytuł losowego artykułu.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby znaki spoza
# ASCII w artykułach i tekstach pomocy były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from dactl import __version__
from dactl.commands import play as cmd_play
from dactl.commands import show as cmd_show
from dactl.commands import count as cmd_count
from dactl.commands import random_title as cmd_random


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dactl",
        description="dactl — odgadnij zakryty artykuł z Wikipedii.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"dactl {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_play.add_parser(subparsers)
    cmd_show.add_parser(subparsers)
    cmd_count.add_parser(subparsers)
    cmd_random.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
