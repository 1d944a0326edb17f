"""Domain enums for verdicts and the game round state machine.

Responsibilities:
  - Define Verdict identifiers shown to the player after a guess.
  - Define GameState identifiers for the two-state round loop.
  - Provide stable display metadata per verdict.

Invariants:
  - VERDICT_METADATA must cover every Verdict exactly once.
"""

from __future__ import annotations

from enum import Enum


class Verdict(Enum):
    HOT = "HOT"
    NOT_HOT = "NOT_HOT"


class GameState(Enum):
    AWAITING_GUESS = "AWAITING_GUESS"
    SHOWING_VERDICT = "SHOWING_VERDICT"


# Display metadata keyed by verdict.
VERDICT_METADATA: dict[Verdict, dict[str, object]] = {
    Verdict.HOT: {
        "label": "🔥 HOT",
        "is_hot": True,
    },
    Verdict.NOT_HOT: {
        "label": "❄️ NOT HOT",
        "is_hot": False,
    },
}


def verdict_from_bool(is_hot: bool) -> Verdict:
    return Verdict.HOT if is_hot else Verdict.NOT_HOT


def verdict_label(verdict: Verdict) -> str:
    return str(VERDICT_METADATA[verdict]["label"])


_missing = [v for v in Verdict if v not in VERDICT_METADATA]
if _missing:
    raise RuntimeError(f"Missing VERDICT_METADATA for: {[m.value for m in _missing]}")
