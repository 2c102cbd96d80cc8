"""
article_parser/cleaner.py — oczyszczanie HTML artykułu przed parsowaniem.

Co usuwamy (w całości, razem z zawartością):
  - skrypty, style, tabele, media (img, figure, audio, video, svg), wzory
  - przypisy ([1], [2] — sup.reference) i linki "[edytuj]"
  - ramki nawigacyjne, infoboksy, listy przypisów, ukryte elementy
  - komentarze HTML

Co spłaszczamy:
  - <br> → spacja (inaczej "a<br>b" skleiłoby się w jedno słowo)
  - formatowanie inline (b, i, a, span …) zostaje — get_text() je spłaszcza

Dodatkowo: normalizacja białych znaków w przebiegach tekstu.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment, Tag

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

NOISE_TAGS: set[str] = {
    "script", "style", "noscript", "template",
    "table", "figure", "img", "picture", "audio", "video", "source", "track",
    "svg", "math", "map", "object", "embed", "iframe",
    "link", "meta", "head", "input", "button", "select", "textarea",
}

# Klasy CSS, po których MediaWiki oznacza elementy niebędące treścią.
NOISE_CLASSES: set[str] = {
    "reference", "mw-ref", "mw-editsection", "mw-empty-elt",
    "reflist", "references", "mw-references-wrap",
    "navbox", "navbox-styles", "vertical-navbox", "sidebar",
    "infobox", "thumb", "gallery", "toc", "hatnote", "metadata",
    "noprint", "shortdescription", "mw-cite-backlink", "ambox",
}

_HIDDEN_STYLE_RE = re.compile(r"display\s*:\s*none", re.IGNORECASE)

# Pusta linia (ew. ze spacjami) = granica akapitu w zwykłym tekście.
_BLANK_LINE_RE = re.compile(r"\n[^\S\n]*\n\s*")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def is_noise(tag: Tag) -> bool:
    """True gdy element nie niesie treści do zgadywania."""
    if tag.name in NOISE_TAGS:
        return True
    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    if NOISE_CLASSES.intersection(classes):
        return True
    style = tag.get("style")
    return isinstance(style, str) and bool(_HIDDEN_STYLE_RE.search(style))


def strip_noise(soup: BeautifulSoup) -> None:
    """Usuwa z drzewa szum (in place)."""
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    for tag in soup.find_all(True):
        # potomkowie usuniętego już elementu są zniszczeni razem z nim
        if tag.decomposed:
            continue
        if is_noise(tag):
            tag.decompose()

    for br in soup.find_all("br"):
        br.replace_with(" ")


def collapse_whitespace(text: str) -> str:
    """Zamienia każdy ciąg białych znaków na jedną spację i przycina brzegi."""
    return " ".join(text.split())


def split_blank_lines(text: str) -> list[str]:
    """Dzieli przebieg tekstu na akapity po pustych liniach (bez pustych)."""
    return [chunk for chunk in _BLANK_LINE_RE.split(text) if chunk.strip()]
