"""Wspólne fikstury testów."""

from __future__ import annotations

import pytest

from article_model import (
    Heading,
    NonWord,
    OrderedList,
    Paragraph,
    UnorderedList,
    WikiArticle,
    Word,
)
from game import GameState


@pytest.fixture
def rust_article() -> WikiArticle:
    """Tytuł "Rust", jeden akapit "Rust is fast"."""
    return WikiArticle(
        title=[Word("Rust")],
        content=[
            Paragraph([Word("Rust"), NonWord(" "), Word("is"), NonWord(" "), Word("fast")]),
        ],
    )


@pytest.fixture
def nested_article() -> WikiArticle:
    """Artykuł z nagłówkiem i zagnieżdżonymi listami."""
    return WikiArticle(
        title=[Word("Quick"), NonWord(" "), Word("fox")],
        content=[
            Heading(2, [Word("Animals")]),
            UnorderedList([
                [Paragraph([Word("fox")])],
                [
                    Paragraph([Word("Dog"), NonWord(", ")]),
                    OrderedList([
                        [Paragraph([Word("FOX"), NonWord("!")])],
                        [Heading(3, [Word("cat")])],
                    ]),
                ],
            ]),
        ],
    )


@pytest.fixture
def state() -> GameState:
    return GameState()
