"""Round state and step result payloads.

Responsibilities:
  - Capture what the player currently sees and how one interaction changed it.
"""

from __future__ import annotations

from dataclasses import dataclass

from thots.core.domain.enums import GameState, Verdict


@dataclass(frozen=True)
class RoundState:
    zip: str
    verdict: Verdict | None = None

    @property
    def game_state(self) -> GameState:
        if self.verdict is None:
            return GameState.AWAITING_GUESS
        return GameState.SHOWING_VERDICT


@dataclass(frozen=True)
class RoundStepResult:
    prev_state: GameState
    final_state: GameState
    round: RoundState
