"""
article_parser — tokenizacja i parsowanie artykułów.

Publiczne API:
  tokenize(text) -> list[Token]
  parse(title, raw_markup) -> WikiArticle
"""

from .tokenizer import tokenize
from .parser import parse

__all__ = [
    "tokenize",
    "parse",
]
