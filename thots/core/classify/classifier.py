"""Hot/not classification of ZIP strings.

Responsibilities:
  - Decide whether a state + 5-digit number falls in one of the state's hot bands.
  - Provide the top-level classify entry point used by the game loop.

Inputs/Outputs:
  - Inputs: ZIP string (or state + digits) and a HotZipRules table.
  - Outputs: bool, or a Verdict for display.

Invariants:
  - Total functions: malformed input is "not hot", never an exception.
"""

from __future__ import annotations

from typing import Any

from thots.core.codec.zip_codec import is_valid_digits, is_valid_state, parse
from thots.core.domain.enums import Verdict, verdict_from_bool
from thots.core.domain.models import HotZipRules
from thots.core.domain.rules_config import DEFAULT_RULES


def is_hot_for_state(state: Any, digits: Any, rules: HotZipRules = DEFAULT_RULES) -> bool:
    if not is_valid_state(state) or not is_valid_digits(digits):
        return False
    bands = rules.hot_bands.get(state)
    if not bands:
        return False
    n = int(digits)
    return any(band.contains(n) for band in bands)


def classify(zip_string: Any, rules: HotZipRules = DEFAULT_RULES) -> bool:
    parsed = parse(zip_string)
    if parsed is None:
        return False
    if not rules.is_hot_state(parsed.state):
        return False
    return is_hot_for_state(parsed.state, parsed.digits, rules)


def verdict_for(zip_string: Any, rules: HotZipRules = DEFAULT_RULES) -> Verdict:
    return verdict_from_bool(classify(zip_string, rules))
