"""Ładowanie artykułu do GameState — z Wikipedii albo z lokalnego pliku HTML."""

from __future__ import annotations

from pathlib import Path

from article_parser import parse
from game import GameState
from wiki_api import fetch_article, fetch_random_title


def load_article(state: GameState, language: str, title: str) -> str:
    """
    Pobiera, parsuje i ładuje artykuł. Zwraca tytuł kanoniczny.
    FetchError przechodzi do wywołującego — stan gry pozostaje bez zmian.
    """
    canonical, raw_html = fetch_article(language, title)
    state.load(parse(canonical, raw_html))
    return canonical


def load_random_article(state: GameState, language: str) -> str:
    return load_article(state, language, fetch_random_title(language))


def load_file(state: GameState, path: Path, title: str | None = None) -> str:
    """Ładuje artykuł z pliku HTML (gra offline). Tytuł domyślnie z nazwy pliku."""
    raw_html = path.read_text(encoding="utf-8")
    title = title or path.stem.replace("_", " ")
    state.load(parse(title, raw_html))
    return title
