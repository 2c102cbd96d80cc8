"""
game — silnik stanu gry i wspólne renderowanie.

Moduły:
  state  — GameState, TokenTreatment, normalize_guess
  render — mask_token, render_tokens, section_lines, Line
"""

from .state import GameState, TokenTreatment, normalize_guess
from .render import Line, mask_token, render_tokens, section_lines

__all__ = [
    # state
    "GameState",
    "TokenTreatment",
    "normalize_guess",
    # render
    "Line",
    "mask_token",
    "render_tokens",
    "section_lines",
]
