"""DTO definitions for app-level data exchange.

Responsibilities:
  - Define stable, typed structures for practice session inputs.
Must not:
  - Implement business logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from thots.core.generate.generator import DEFAULT_P_HOT


@dataclass(frozen=True)
class PracticeSpec:
    p_hot: float = DEFAULT_P_HOT
    seed: Optional[int] = None
    rounds: int = 10

    def validate(self) -> None:
        if isinstance(self.p_hot, bool) or not isinstance(self.p_hot, (int, float)):
            raise ValueError("p_hot must be a number")
        if not 0.0 <= self.p_hot <= 1.0:
            raise ValueError("p_hot must be within [0, 1]")

        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")

        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be >= 0")
