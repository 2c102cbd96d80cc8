"""
article_model/tokens.py — tokeny tekstu artykułu.

Token to albo Word (słowo do zgadnięcia), albo NonWord (białe znaki,
interpunkcja, resztki znaczników). Oba warianty mają niepusty `text`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Word:
    """Maksymalny ciąg znaków słowotwórczych (litery/cyfry Unicode)."""
    text: str

    def char_count(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class NonWord:
    """Maksymalny ciąg pozostałych znaków — zawsze widoczny."""
    text: str

    def char_count(self) -> int:
        return len(self.text)


type Token = Word | NonWord
