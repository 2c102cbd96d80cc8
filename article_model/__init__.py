"""
article_model — struktury danych artykułu gry dactl.

Użycie:
  from article_model import WikiArticle, Heading, Paragraph, Word, ...

Moduły:
  tokens    — Word, NonWord, Token
  sections  — Heading, Paragraph, UnorderedList, OrderedList, Section,
              clamp_heading_level
  documents — WikiArticle, iter_tokens, iter_section_tokens, iter_words
"""

from .tokens import (
    Word,
    NonWord,
    Token,
)
from .sections import (
    MIN_HEADING_LEVEL,
    MAX_HEADING_LEVEL,
    clamp_heading_level,
    Heading,
    Paragraph,
    UnorderedList,
    OrderedList,
    Section,
)
from .documents import (
    WikiArticle,
    iter_tokens,
    iter_section_tokens,
    iter_words,
)

__all__ = [
    # tokens
    "Word",
    "NonWord",
    "Token",
    # sections
    "MIN_HEADING_LEVEL",
    "MAX_HEADING_LEVEL",
    "clamp_heading_level",
    "Heading",
    "Paragraph",
    "UnorderedList",
    "OrderedList",
    "Section",
    # documents
    "WikiArticle",
    "iter_tokens",
    "iter_section_tokens",
    "iter_words",
]
