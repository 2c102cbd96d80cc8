"""
wiki_api/config.py — konfiguracja klienta Wikipedii przez zmienne środowiskowe.

Zmienne środowiskowe (wszystkie opcjonalne):
  DACTL_LANGUAGE      domyślny kod języka Wikipedii       (domyślnie: en)
  DACTL_USER_AGENT    nagłówek User-Agent zapytań HTTP
  DACTL_TIMEOUT       timeout zapytania w sekundach       (domyślnie: 20)
  DACTL_MAX_RETRIES   ponowienia przy 429/503             (domyślnie: 3)
  DACTL_API_URL       szablon URL API z polem {lang}

Opcjonalnie plik .env w katalogu głównym projektu (zmienne już ustawione
w środowisku mają pierwszeństwo).
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=False)

DEFAULT_LANGUAGE    = "en"
DEFAULT_USER_AGENT  = "dactl/0.1 (word guessing game)"
DEFAULT_TIMEOUT     = 20.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_API_URL     = "https://{lang}.wikipedia.org/w/api.php"


@dataclass(frozen=True, slots=True)
class Settings:
    language:    str
    user_agent:  str
    timeout:     float
    max_retries: int
    api_url:     str     # szablon z polem {lang}


def _env_number(name: str, default: float, kind: type) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = kind(raw.strip())
    except ValueError as exc:
        raise ValueError(
            f"Nieprawidłowa wartość zmiennej {name}: {raw!r} "
            f"(oczekiwano liczby typu {kind.__name__})"
        ) from exc
    if value < 0:
        raise ValueError(f"Zmienna {name} nie może być ujemna: {raw!r}")
    return value


def load_settings() -> Settings:
    """Czyta ustawienia ze środowiska (przy każdym wywołaniu od nowa)."""
    api_url = os.getenv("DACTL_API_URL") or DEFAULT_API_URL
    if "{lang}" not in api_url:
        raise ValueError(f"DACTL_API_URL musi zawierać pole {{lang}}: {api_url!r}")
    return Settings(
        language    = os.getenv("DACTL_LANGUAGE") or DEFAULT_LANGUAGE,
        user_agent  = os.getenv("DACTL_USER_AGENT") or DEFAULT_USER_AGENT,
        timeout     = float(_env_number("DACTL_TIMEOUT", DEFAULT_TIMEOUT, float)),
        max_retries = int(_env_number("DACTL_MAX_RETRIES", DEFAULT_MAX_RETRIES, int)),
        api_url     = api_url,
    )
