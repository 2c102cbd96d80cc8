"""
article_parser/tokenizer.py — podział tekstu na tokeny Word/NonWord.

Znak słowotwórczy = znak Unicode z kategorii L (litery), M (znaki łączące:
znaki samogłoskowe, virama, akcenty w postaci NFD) lub N (cyfry i liczby).
Tokenizacja jest bezstratna: złączenie `text` wszystkich tokenów daje
dokładnie tekst wejściowy. Żadnej normalizacji (wielkość liter, akcenty).
"""

from __future__ import annotations

import itertools
import unicodedata

from article_model import NonWord, Token, Word

_WORD_CATEGORIES = frozenset("LMN")


def is_word_char(ch: str) -> bool:
    return unicodedata.category(ch)[0] in _WORD_CATEGORIES


def tokenize(text: str) -> list[Token]:
    # groupby daje przebiegi maksymalne, więc rodzaje tokenów się przeplatają
    return [
        Word("".join(run)) if is_word else NonWord("".join(run))
        for is_word, run in itertools.groupby(text, key=is_word_char)
    ]
