"""
article_model/sections.py — sekcje (bloki strukturalne) artykułu.

Section jest typem rekurencyjnym: elementy list zawierają własne sekwencje
sekcji (nagłówki, akapity, podlisty). Drzewo nie ma odwołań do rodzica.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .tokens import Token

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


def clamp_heading_level(level: int) -> int:
    """Sprowadza poziom nagłówka do zakresu [1, 6]."""
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))


@dataclass(slots=True)
class Heading:
    level: int            # 1..6
    tokens: list[Token]


@dataclass(slots=True)
class Paragraph:
    tokens: list[Token]


@dataclass(slots=True)
class UnorderedList:
    # każdy element listy to własna sekwencja sekcji
    items: list[list[Section]] = field(default_factory=list)


@dataclass(slots=True)
class OrderedList:
    # numeracja (od 1) wynika z pozycji, nie jest przechowywana
    items: list[list[Section]] = field(default_factory=list)


type Section = Heading | Paragraph | UnorderedList | OrderedList
