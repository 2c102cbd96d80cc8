"""
wiki_api/client.py — pobieranie artykułów z Wikipedii (MediaWiki Action API).

Publiczne API:
  fetch_article(language_tag, title) -> (canonical_title, raw_html)
  fetch_random_title(language_tag)   -> title

Każdy błąd (zły kod języka, brak artykułu, sieć, HTTP, niepoprawny JSON)
zgłaszany jest jako FetchError. Przy 429/503 zapytanie jest ponawiane
z rosnącym opóźnieniem (do Settings.max_retries razy).
"""

from __future__ import annotations

import functools
import re
import sys
import time
from typing import Any

import requests

from .config import Settings, load_settings

_LANGUAGE_TAG_RE = re.compile(r"[a-z]{2,12}(-[a-z0-9]{1,12})*")
_RETRY_STATUS = {429, 503}


class FetchError(RuntimeError):
    """Nie udało się pobrać artykułu lub tytułu z Wikipedii."""


@functools.lru_cache(maxsize=4)
def _get_session(user_agent: str) -> requests.Session:
    """Zwraca (i cache'uje) sesję HTTP z danym User-Agent."""
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    return session


def _api_url(language_tag: str, settings: Settings) -> str:
    tag = language_tag.strip().lower()
    if not _LANGUAGE_TAG_RE.fullmatch(tag):
        raise FetchError(f"Nieprawidłowy kod języka: {language_tag!r}")
    return settings.api_url.format(lang=tag)


def _retry_delay(resp: requests.Response, attempt: int) -> float:
    """Opóźnienie z nagłówka Retry-After albo 2^attempt sekund."""
    header = resp.headers.get("Retry-After", "")
    try:
        return max(0.0, float(header))
    except ValueError:
        return float(2 ** attempt)


def _request_json(
    language_tag: str,
    params: dict[str, Any],
    settings: Settings,
) -> dict[str, Any]:
    url = _api_url(language_tag, settings)
    session = _get_session(settings.user_agent)
    query = {"format": "json", "formatversion": 2, **params}
    attempt = 0

    while True:
        try:
            resp = session.get(url, params=query, timeout=settings.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Błąd połączenia z {url}: {exc}") from exc

        if resp.status_code in _RETRY_STATUS:
            attempt += 1
            if attempt > settings.max_retries:
                raise FetchError(
                    f"HTTP {resp.status_code} po {settings.max_retries} próbach. "
                    f"Spróbuj później."
                )
            delay = _retry_delay(resp, attempt)
            print(
                f"[warn] HTTP {resp.status_code} — czekam {delay:.0f}s "
                f"(próba {attempt}/{settings.max_retries})...",
                file=sys.stderr,
            )
            time.sleep(delay)
            continue

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise FetchError(f"HTTP {resp.status_code} dla {url}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise FetchError(f"Nieprawidłowa odpowiedź JSON z {url}") from exc
        if not isinstance(data, dict):
            raise FetchError(f"Nieoczekiwany format odpowiedzi z {url}")

        error = data.get("error")
        if error:
            code = error.get("code", "?") if isinstance(error, dict) else "?"
            info = error.get("info", error) if isinstance(error, dict) else error
            raise FetchError(f"Błąd API MediaWiki ({code}): {info}")
        return data


def fetch_article(
    language_tag: str,
    title: str,
    settings: Settings | None = None,
) -> tuple[str, str]:
    """
    Pobiera HTML artykułu.

    Args:
        language_tag: Kod języka Wikipedii, np. "en", "pl".
        title:        Tytuł artykułu (przekierowania są rozwijane).
        settings:     Ustawienia; jeśli None, czytane ze środowiska.

    Returns:
        (kanoniczny tytuł, HTML treści)

    Raises:
        FetchError: Każdy błąd pobierania.
    """
    if not title.strip():
        raise FetchError("Pusty tytuł artykułu.")
    settings = settings or load_settings()
    data = _request_json(
        language_tag,
        {
            "action": "parse",
            "page": title.strip(),
            "prop": "text",
            "redirects": 1,
            "disableeditsection": 1,
            "disabletoc": 1,
        },
        settings,
    )
    parsed = data.get("parse")
    if not isinstance(parsed, dict):
        raise FetchError(f"Brak treści artykułu {title!r} w odpowiedzi API.")
    text = parsed.get("text")
    if isinstance(text, dict):  # formatversion=1: {"*": "..."}
        text = text.get("*")
    if not isinstance(text, str):
        raise FetchError(f"Brak HTML artykułu {title!r} w odpowiedzi API.")
    return str(parsed.get("title") or title.strip()), text


def fetch_random_title(language_tag: str, settings: Settings | None = None) -> str:
    """Zwraca tytuł losowego artykułu (przestrzeń nazw 0)."""
    settings = settings or load_settings()
    data = _request_json(
        language_tag,
        {"action": "query", "list": "random", "rnnamespace": 0, "rnlimit": 1},
        settings,
    )
    try:
        return str(data["query"]["random"][0]["title"])
    except (KeyError, IndexError, TypeError) as exc:
        raise FetchError("Brak losowego tytułu w odpowiedzi API.") from exc
