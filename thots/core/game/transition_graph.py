"""Allowed state transitions for the guess/reveal loop.

Invariants:
  - Every interaction moves to the other state; there are no self-loops.
"""

from __future__ import annotations

from thots.core.domain.enums import GameState

ALLOWED_TRANSITIONS: dict[GameState, GameState] = {
    GameState.AWAITING_GUESS: GameState.SHOWING_VERDICT,
    GameState.SHOWING_VERDICT: GameState.AWAITING_GUESS,
}
