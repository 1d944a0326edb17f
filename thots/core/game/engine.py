"""Step function for the guess/reveal loop.

Responsibilities:
  - Start a round with a practice ZIP.
  - On interaction, reveal the verdict or move on to a fresh ZIP.
  - Score a player's guess against the verdict.

Inputs/Outputs:
  - Inputs: previous RoundState, an injected RandomSource, p_hot.
  - Outputs: RoundStepResult with the new RoundState.

Invariants:
  - Revealing never draws from rng; advancing draws only through the generator.
"""

from __future__ import annotations

from thots.core.classify.classifier import verdict_for
from thots.core.domain.enums import GameState, VERDICT_METADATA
from thots.core.domain.models import HotZipRules
from thots.core.domain.rules_config import DEFAULT_RULES
from thots.core.generate.generator import DEFAULT_P_HOT, RandomSource, random_practice_zip
from .result import RoundState, RoundStepResult
from .transition_graph import ALLOWED_TRANSITIONS


def new_round(
    rng: RandomSource, p_hot: float = DEFAULT_P_HOT, rules: HotZipRules = DEFAULT_RULES
) -> RoundState:
    return RoundState(zip=random_practice_zip(p_hot, rng=rng, rules=rules))


def advance(
    prev: RoundState,
    rng: RandomSource,
    p_hot: float = DEFAULT_P_HOT,
    rules: HotZipRules = DEFAULT_RULES,
) -> RoundStepResult:
    prev_state = prev.game_state
    if prev_state == GameState.AWAITING_GUESS:
        next_round = RoundState(zip=prev.zip, verdict=verdict_for(prev.zip, rules))
    else:
        next_round = new_round(rng, p_hot, rules)

    final_state = next_round.game_state
    if ALLOWED_TRANSITIONS[prev_state] != final_state:
        raise RuntimeError(f"Disallowed transition {prev_state.value} -> {final_state.value}")

    return RoundStepResult(prev_state=prev_state, final_state=final_state, round=next_round)


def score_guess(round_state: RoundState, guess_hot: bool) -> bool:
    if round_state.verdict is None:
        raise ValueError("verdict not revealed yet")
    return bool(VERDICT_METADATA[round_state.verdict]["is_hot"]) == guess_hot


__all__ = ["advance", "new_round", "score_guess"]
