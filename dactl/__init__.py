"""dactl — gra w odgadywanie zakrytych słów artykułu z Wikipedii."""

__version__ = "0.1.0"
