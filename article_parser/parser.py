"""
article_parser/parser.py — parsowanie HTML artykułu do drzewa sekcji.

Wejście: tytuł + HTML zwrócony przez MediaWiki (action=parse).
Wyjście: WikiArticle z tokenami tytułu i rekurencyjną listą sekcji.

Parser nie waliduje — wyciąga strukturę "najlepiej jak się da":
  - h1–h6 (oraz role="heading") → Heading, poziom przycinany do [1, 6]
  - ul / ol / dl → UnorderedList / OrderedList, element listy = sekwencja sekcji
  - każdy przebieg tekstu inline → Paragraph
  - zwykły tekst bez znaczników → akapity rozdzielone pustymi liniami
  - nieznane lub uszkodzone znaczniki → ich tekst trafia do akapitu
Parser nigdy nie rzuca wyjątku na złośliwym/uszkodzonym wejściu.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, CData, NavigableString, PageElement, Tag
from bs4.element import PreformattedString
from bs4.builder import ParserRejectedMarkup

from article_model import (
    Heading,
    OrderedList,
    Paragraph,
    Section,
    UnorderedList,
    WikiArticle,
    clamp_heading_level,
)

from .cleaner import collapse_whitespace, split_blank_lines, strip_noise
from .tokenizer import tokenize

# h0, h7 itp. też traktujemy jako nagłówki (poziom zostanie przycięty)
_HEADING_TAG_RE = re.compile(r"h(\d+)")

# Nagłówek w stylu wikitekstu w zwykłym tekście: "== Historia =="
_WIKITEXT_HEADING_RE = re.compile(r"(=+)\s*(.+?)\s*=+")

_DEFAULT_ARIA_LEVEL = 2

_LIST_TAGS = {"ul", "ol", "dl", "menu"}
_BLOCK_TAGS: set[str] = {
    "p", "div", "article", "section", "main", "aside", "nav",
    "header", "footer", "blockquote", "pre", "address", "center",
    "li", "dt", "dd", "caption", "figcaption",
    "details", "summary", "form", "fieldset", "hr", "body", "html",
} | _LIST_TAGS


# ---------------------------------------------------------------------------
# Klasyfikacja elementów
# ---------------------------------------------------------------------------

def _heading_level(tag: Tag) -> int | None:
    """Poziom nagłówka (już przycięty) albo None gdy to nie nagłówek."""
    m = _HEADING_TAG_RE.fullmatch(tag.name)
    if m:
        return clamp_heading_level(int(m.group(1)))
    if tag.get("role") == "heading":
        raw = tag.get("aria-level")
        try:
            level = int(raw) if isinstance(raw, str) else _DEFAULT_ARIA_LEVEL
        except ValueError:
            level = _DEFAULT_ARIA_LEVEL
        return clamp_heading_level(level)
    return None


def _is_block(tag: Tag) -> bool:
    return tag.name in _BLOCK_TAGS or _heading_level(tag) is not None


def _has_block_descendant(tag: Tag) -> bool:
    return any(_is_block(d) for d in tag.find_all(True))


# ---------------------------------------------------------------------------
# Przebiegi tekstu
# ---------------------------------------------------------------------------

def _text_sections(raw: str) -> list[Section]:
    """
    Zamienia surowy tekst (wejście bez HTML) na sekcje.

    Puste linie dzielą akapity; samotna linia "== X ==" staje się nagłówkiem
    (poziom = liczba znaków '=', przycięty do [1, 6]).
    """
    sections: list[Section] = []
    for chunk in split_blank_lines(raw):
        stripped = chunk.strip()
        m = _WIKITEXT_HEADING_RE.fullmatch(stripped)
        if m and "\n" not in stripped:
            level = clamp_heading_level(len(m.group(1)))
            sections.append(Heading(level, tokenize(collapse_whitespace(m.group(2)))))
            continue
        text = collapse_whitespace(chunk)
        if text:
            sections.append(Paragraph(tokenize(text)))
    return sections


def _run_sections(raw: str) -> list[Section]:
    """Przebieg tekstu inline z HTML: jeden akapit (białe znaki zwinięte)."""
    text = collapse_whitespace(raw)
    return [Paragraph(tokenize(text))] if text else []


def _child_text(child: PageElement) -> str | None:
    """Tekst węzła tekstowego; None dla komentarzy, doctype i elementów."""
    if isinstance(child, CData):
        return str(child)
    if isinstance(child, PreformattedString) or not isinstance(child, NavigableString):
        return None
    return str(child)


# ---------------------------------------------------------------------------
# Przejście drzewa DOM
# ---------------------------------------------------------------------------

def _parse_children(el: Tag | BeautifulSoup) -> list[Section]:
    """
    Przechodzi dzieci elementu i zwraca jego sekcje.

    Tekst i elementy inline zbierane są w bieżący przebieg; element blokowy
    zamyka przebieg (→ akapit) i jest parsowany osobno.
    """
    sections: list[Section] = []
    run: list[str] = []

    def flush() -> None:
        if run:
            sections.extend(_run_sections("".join(run)))
            run.clear()

    for child in el.children:
        text = _child_text(child)
        if text is not None:
            run.append(text)
            continue
        if not isinstance(child, Tag):
            continue
        if _is_block(child) or _has_block_descendant(child):
            flush()
            sections.extend(_parse_block(child))
        else:
            run.append(child.get_text())

    flush()
    return sections


def _parse_list_items(tag: Tag) -> list[list[Section]]:
    """Elementy listy; treść poza <li>/<dt>/<dd> staje się osobnym elementem."""
    items: list[list[Section]] = []
    stray: list[str] = []

    def flush_stray() -> None:
        if stray:
            body = _run_sections("".join(stray))
            if body:
                items.append(body)
            stray.clear()

    for child in tag.children:
        text = _child_text(child)
        if text is not None:
            stray.append(text)
            continue
        if not isinstance(child, Tag):
            continue
        flush_stray()
        if child.name in ("li", "dt", "dd"):
            body = _parse_children(child)
        else:
            body = _parse_block(child)
        if body:
            items.append(body)

    flush_stray()
    return items


def _parse_block(tag: Tag) -> list[Section]:
    level = _heading_level(tag)
    if level is not None:
        text = collapse_whitespace(tag.get_text())
        return [Heading(level, tokenize(text))] if text else []

    if tag.name in _LIST_TAGS:
        items = _parse_list_items(tag)
        if not items:
            return []
        if tag.name == "ol":
            return [OrderedList(items)]
        return [UnorderedList(items)]

    # akapity, kontenery i nieznane elementy z blokowymi dziećmi
    return _parse_children(tag)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse(title: str, raw_markup: str) -> WikiArticle:
    """
    Parsuje artykuł do WikiArticle.

    Args:
        title:      Tytuł artykułu (tokenizowany bez zmian).
        raw_markup: HTML treści; może być pusty, uszkodzony lub zwykłym tekstem.

    Returns:
        WikiArticle — zawsze, także dla pustego/uszkodzonego wejścia.
    """
    if not raw_markup.strip():
        return WikiArticle(title=tokenize(title), content=[])

    try:
        soup = BeautifulSoup(raw_markup, "html.parser")
    except ParserRejectedMarkup:
        # html.parser odrzucił wejście, czytamy je jako zwykły tekst
        return WikiArticle(title=tokenize(title), content=_text_sections(raw_markup))

    strip_noise(soup)
    if soup.find(True) is None:
        # brak znaczników: zwykły tekst, akapity rozdzielone pustymi liniami
        return WikiArticle(title=tokenize(title), content=_text_sections(soup.get_text()))

    try:
        content = _parse_children(soup)
    except RecursionError:
        # zbyt głęboko zagnieżdżone (np. niezamknięte) bloki: sam tekst, bez struktury
        content = _text_sections(soup.get_text("\n\n"))
    return WikiArticle(title=tokenize(title), content=content)
