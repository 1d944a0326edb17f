from __future__ import annotations

import random
from typing import Optional

from thots.core.classify.classifier import classify
from thots.core.domain.models import HotZipRules
from thots.core.domain.rules_config import DEFAULT_RULES
from thots.core.game.engine import advance, new_round
from thots.core.game.result import RoundState, RoundStepResult
from thots.core.generate.generator import DEFAULT_P_HOT, RandomSource, random_practice_zip


class ThotsApplication:
    def __init__(
        self,
        rng: RandomSource,
        rules: HotZipRules = DEFAULT_RULES,
        p_hot: float = DEFAULT_P_HOT,
    ) -> None:
        self._rng = rng
        self._rules = rules
        self._p_hot = p_hot
        self._round: Optional[RoundState] = None

    @classmethod
    def from_seed(cls, seed: Optional[int] = None, **kwargs) -> "ThotsApplication":
        return cls(random.Random(seed).random, **kwargs)

    @property
    def rules(self) -> HotZipRules:
        return self._rules

    @property
    def current_round(self) -> Optional[RoundState]:
        return self._round

    def generate_practice_zip(self, p_hot: float = DEFAULT_P_HOT) -> str:
        return random_practice_zip(p_hot, rng=self._rng, rules=self._rules)

    def classify(self, zip_string: str) -> bool:
        return classify(zip_string, self._rules)

    def start(self) -> RoundState:
        self._round = new_round(self._rng, self._p_hot, self._rules)
        return self._round

    def click(self) -> RoundStepResult:
        if self._round is None:
            self.start()
        step = advance(self._round, self._rng, self._p_hot, self._rules)
        self._round = step.round
        return step
