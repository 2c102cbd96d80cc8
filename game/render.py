"""
game/render.py — wspólne pomocnicze funkcje renderowania dla interfejsów.

Zakryte słowo = jeden znak '_' na każdy znak słowa. Numeracja list
uporządkowanych liczona jest tu, przy wyświetlaniu (od 1).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from article_model import Heading, OrderedList, Paragraph, Section, Token, UnorderedList

from .state import GameState, TokenTreatment

BLANK_CHAR = "_"
BULLET = "•"
INDENT = "   "


@dataclass(frozen=True, slots=True)
class Line:
    kind:   str            # "heading" | "paragraph"
    level:  int            # poziom nagłówka; 0 dla akapitu
    prefix: str            # wcięcie + znacznik elementu listy ("• ", "2. ")
    tokens: list[Token]


def mask_token(token: Token, treatment: TokenTreatment) -> str:
    if treatment is TokenTreatment.BLANK:
        return BLANK_CHAR * token.char_count()
    return token.text


def render_tokens(state: GameState, tokens: Iterable[Token]) -> str:
    """Skleja tokeny, zakrywając nieodgadnięte słowa."""
    return "".join(mask_token(t, state.token_treatment(t)) for t in tokens)


def section_lines(sections: Iterable[Section], indent: str = "") -> Iterator[Line]:
    """
    Spłaszcza drzewo sekcji do linii do wyświetlenia w terminalu.

    Pierwsza linia elementu listy dostaje znacznik ("• " albo "n. "),
    kolejne linie tego samego elementu — samo wcięcie.
    """
    for section in sections:
        match section:
            case Heading(level=level, tokens=tokens):
                yield Line("heading", level, indent, tokens)
            case Paragraph(tokens=tokens):
                yield Line("paragraph", 0, indent, tokens)
            case UnorderedList(items=items):
                for item in items:
                    yield from _item_lines(item, indent, f"{BULLET} ")
            case OrderedList(items=items):
                for i, item in enumerate(items, start=1):
                    yield from _item_lines(item, indent, f"{i}. ")


def _item_lines(item: list[Section], indent: str, marker: str) -> Iterator[Line]:
    inner = indent + INDENT
    for n, line in enumerate(section_lines(item, inner)):
        if n == 0:
            # znacznik zajmuje miejsce wcięcia elementu
            yield Line(line.kind, line.level, indent + marker.rjust(len(INDENT)) + line.prefix[len(inner):], line.tokens)
        else:
            yield line
