"""
article_model/documents.py — model całego artykułu (WikiArticle).

WikiArticle = tytuł (tokeny) + treść (sekcje). Po załadowaniu do GameState
artykuł jest tylko czytany; przeładowanie podmienia go w całości.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .sections import Heading, OrderedList, Paragraph, Section, UnorderedList
from .tokens import Token, Word


@dataclass(slots=True)
class WikiArticle:
    title: list[Token] = field(default_factory=list)
    content: list[Section] = field(default_factory=list)


def iter_section_tokens(sections: Iterable[Section]) -> Iterator[Token]:
    """Zwraca tokeny wszystkich sekcji w kolejności dokumentu (z listami włącznie)."""
    # stos iteratorów: głębokość list nie jest ograniczona stosem wywołań
    stack: list[Iterator[Section]] = [iter(sections)]
    while stack:
        section = next(stack[-1], None)
        if section is None:
            stack.pop()
            continue
        match section:
            case Heading(tokens=tokens) | Paragraph(tokens=tokens):
                yield from tokens
            case UnorderedList(items=items) | OrderedList(items=items):
                stack.append(itertools.chain.from_iterable(items))


def iter_tokens(article: WikiArticle) -> Iterator[Token]:
    """Tokeny tytułu, a potem całej treści."""
    yield from article.title
    yield from iter_section_tokens(article.content)


def iter_words(article: WikiArticle) -> Iterator[Word]:
    for token in iter_tokens(article):
        if isinstance(token, Word):
            yield token
