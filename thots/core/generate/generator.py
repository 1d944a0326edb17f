"""Random ZIP generation for practice rounds.

Responsibilities:
  - Draw uniformly random ZIPs for a state, guaranteed-hot ZIPs, and practice
    ZIPs that are hot with a given probability and cold otherwise.

Inputs/Outputs:
  - Inputs: optional state code, an injected RandomSource, a HotZipRules table.
  - Outputs: ZIP strings in "SS NNNNN" form, or None for unsupported states.

Invariants:
  - Every draw goes through the supplied rng; no module-level random state.
  - Cold practice ZIPs come from rejection sampling with no retry cap. This
    terminates because each state's hot bands are strictly smaller than its
    valid space (enforced by the rules loader).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Protocol

from thots.core.classify.classifier import classify
from thots.core.codec.zip_codec import format_zip
from thots.core.domain.models import HotBand, HotZipRules
from thots.core.domain.rules_config import DEFAULT_RULES


class RandomSource(Protocol):
    def __call__(self) -> float:
        ...


DEFAULT_P_HOT = 0.5

_DEBUG_FN: Callable[[str], None] | None = None


def set_generator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def pick(sequence: Any, rng: RandomSource) -> Any:
    # Strings and other non-list input are not choice sequences.
    if not isinstance(sequence, (list, tuple)) or not sequence:
        return None
    return sequence[math.floor(rng() * len(sequence))]


def rand_int(low: int, high: int, rng: RandomSource) -> int:
    return math.floor(rng() * (high - low + 1)) + low


def _resolve_state(state: Optional[str], rng: RandomSource, rules: HotZipRules) -> Optional[str]:
    if state is None:
        state = pick(rules.hot_states, rng)
    if state is None or not rules.is_hot_state(state):
        return None
    return state


def _draw_from_bands(bands: tuple[HotBand, ...], rng: RandomSource) -> int:
    # Single-band states skip the band pick so one draw lands the number.
    band = bands[0] if len(bands) == 1 else pick(bands, rng)
    return rand_int(band.low, band.high, rng)


def _draw_uniform(bands: tuple[HotBand, ...], rng: RandomSource) -> int:
    # One draw over the union; bands weighted by width.
    offset = rand_int(0, sum(band.size for band in bands) - 1, rng)
    for band in bands:
        if offset < band.size:
            return band.low + offset
        offset -= band.size
    raise RuntimeError("offset outside band union")


def random_hot_zip(
    state: Optional[str], rng: RandomSource, rules: HotZipRules = DEFAULT_RULES
) -> Optional[str]:
    resolved = _resolve_state(state, rng, rules)
    if resolved is None:
        return None
    return format_zip(resolved, _draw_from_bands(rules.hot_bands[resolved], rng))


def random_any_zip(
    state: Optional[str], rng: RandomSource, rules: HotZipRules = DEFAULT_RULES
) -> Optional[str]:
    resolved = _resolve_state(state, rng, rules)
    if resolved is None:
        return None
    return format_zip(resolved, _draw_uniform(rules.valid_spaces[resolved], rng))


def random_cold_zip(rng: RandomSource, rules: HotZipRules = DEFAULT_RULES) -> str:
    rejected = 0
    while True:
        candidate = random_any_zip(None, rng, rules)
        if candidate is not None and not classify(candidate, rules):
            break
        rejected += 1
    if _DEBUG_FN is not None:
        _DEBUG_FN(f"COLD_ZIP zip={candidate} rejected={rejected}")
    return candidate


def random_practice_zip(
    p_hot: float = DEFAULT_P_HOT, *, rng: RandomSource, rules: HotZipRules = DEFAULT_RULES
) -> str:
    if rng() < p_hot:
        zip_string = random_hot_zip(None, rng, rules)
        if zip_string is None:
            raise RuntimeError("rules table has no hot states")
        return zip_string
    return random_cold_zip(rng, rules)
