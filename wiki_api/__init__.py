"""
wiki_api — pobieranie artykułów i losowych tytułów z Wikipedii.

Moduły:
  config — Settings, load_settings (zmienne DACTL_*, plik .env)
  client — fetch_article, fetch_random_title, FetchError
"""

from .config import Settings, load_settings
from .client import FetchError, fetch_article, fetch_random_title

__all__ = [
    "Settings",
    "load_settings",
    "FetchError",
    "fetch_article",
    "fetch_random_title",
]
