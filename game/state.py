"""
game/state.py — silnik stanu gry: zgadywanie słów zakrytego artykułu.

GameState przechowuje wyłącznie stan gry:
  - article:        załadowany WikiArticle albo None (stan Empty)
  - guesses:        zbiór znormalizowanych prób (strip + lower)
  - selected_guess: aktualnie podświetlane słowo (nie musi być w guesses)

Interfejsy (terminal, GUI) pytają o stan wyłącznie przez metody:
token_treatment(), title_complete(), count_occurrences(), guess_table().
Brak blokad — zakładamy jednego piszącego naraz.
"""

from __future__ import annotations

from enum import StrEnum

from article_model import NonWord, Token, WikiArticle, Word, iter_words


class TokenTreatment(StrEnum):
    """Sposób wyświetlenia tokenu przy bieżącym stanie gry."""
    BLANK     = "blank"
    SHOW      = "show"
    HIGHLIGHT = "highlight"


def normalize_guess(raw: str) -> str:
    """Postać normalna słowa do porównań: bez białych znaków na brzegach, małe litery."""
    return raw.strip().lower()


class GameState:
    """
    Stan jednej gry. Dwa stany: Empty (brak artykułu) i Loaded.

    load() przechodzi Empty→Loaded lub Loaded→Loaded, czyszcząc próby
    i zaznaczenie. Pozostałe operacje w stanie Empty są bezpieczne
    i zwracają puste/zerowe wyniki.
    """

    def __init__(self) -> None:
        self._article: WikiArticle | None = None
        self._guesses: set[str] = set()
        self._selected: str | None = None

    # ------------------------------------------------------------------
    # Odczyt
    # ------------------------------------------------------------------

    @property
    def article(self) -> WikiArticle | None:
        return self._article

    @property
    def is_loaded(self) -> bool:
        return self._article is not None

    @property
    def guesses(self) -> tuple[str, ...]:
        """Próby w porządku alfabetycznym (kolejność dodania nie ma znaczenia)."""
        return tuple(sorted(self._guesses))

    @property
    def selected_guess(self) -> str | None:
        return self._selected

    # ------------------------------------------------------------------
    # Zmiany stanu
    # ------------------------------------------------------------------

    def load(self, article: WikiArticle) -> None:
        """Podmienia artykuł w całości; czyści próby i zaznaczenie."""
        self._article = article
        self._guesses = set()
        self._selected = None

    def register_guess(self, raw: str) -> str | None:
        """
        Dodaje próbę. Zwraca jej postać znormalizowaną albo None, gdy po
        przycięciu nic nie zostało (wtedy nic się nie zmienia).
        """
        guess = normalize_guess(raw)
        if not guess:
            return None
        self._guesses.add(guess)
        return guess

    def toggle_selection(self, raw: str) -> str | None:
        """
        Przełącza podświetlenie: to samo słowo drugi raz → odznaczenie.
        Zwraca nowe zaznaczenie.
        """
        guess = normalize_guess(raw)
        if not guess or guess == self._selected:
            self._selected = None
        else:
            self._selected = guess
        return self._selected

    # ------------------------------------------------------------------
    # Zapytania
    # ------------------------------------------------------------------

    def title_complete(self) -> bool:
        """
        True gdy każde słowo tytułu zostało odgadnięte. Liczone przy każdym
        wywołaniu; tytuł bez słów jest kompletny. W stanie Empty → False.
        """
        if self._article is None:
            return False
        return all(
            normalize_guess(token.text) in self._guesses
            for token in self._article.title
            if isinstance(token, Word)
        )

    def token_treatment(self, token: Token) -> TokenTreatment:
        match token:
            case NonWord():
                return TokenTreatment.SHOW
            case Word(text=text):
                word = normalize_guess(text)
                if self._selected is not None and word == self._selected:
                    return TokenTreatment.HIGHLIGHT
                # odgadnięty tytuł odsłania cały artykuł, nie tylko tytuł
                if word in self._guesses or self.title_complete():
                    return TokenTreatment.SHOW
                return TokenTreatment.BLANK
        return TokenTreatment.SHOW

    def count_occurrences(self, word: str) -> int | None:
        """
        Liczba wystąpień słowa (tytuł + cała treść, także wnętrza list).

        Returns:
            0 gdy słowo nie występuje, None gdy nie załadowano artykułu.
        """
        if self._article is None:
            return None
        target = normalize_guess(word)
        return sum(
            1 for token in iter_words(self._article)
            if normalize_guess(token.text) == target
        )

    def guess_table(self) -> list[tuple[str, int]]:
        """Próby (alfabetycznie) z liczbą wystąpień w artykule."""
        if self._article is None:
            return []
        counts: dict[str, int] = dict.fromkeys(self._guesses, 0)
        for token in iter_words(self._article):
            word = normalize_guess(token.text)
            if word in counts:
                counts[word] += 1
        return sorted(counts.items())

    def revealed_ratio(self) -> float:
        """Udział słów artykułu, które nie są zakryte (0.0 dla braku słów)."""
        if self._article is None:
            return 0.0
        words = [normalize_guess(token.text) for token in iter_words(self._article)]
        if not words:
            return 0.0
        if self.title_complete():
            return 1.0
        shown = sum(1 for w in words if w in self._guesses or w == self._selected)
        return shown / len(words)
