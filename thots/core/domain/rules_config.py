"""Loader for packaged hot-ZIP rules tables.

Responsibilities:
  - Read a rules JSON file by rule_id and build an immutable HotZipRules.
  - Reject tables that would break classification or generation.

Invariants:
  - Every hot state has at least one hot band and one valid-space band.
  - Bands lie within [0, 99999], have low <= high and do not overlap per state.
  - Each hot band lies inside one valid-space band of its state.
  - Hot size is strictly smaller than valid size per state, so rejection
    sampling for a cold ZIP always has somewhere to land.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .models import HotBand, HotZipRules

DEFAULT_RULE_ID = "HOT_ZIP_V1"

ZIP_MIN = 0
ZIP_MAX = 99999


class RulesConfigError(ValueError):
    pass


def _rules_dir() -> Path:
    return Path(__file__).resolve().parent / "rules"


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise RulesConfigError(f"Missing required field '{key}' in rules config")
    value = payload[key]
    if not isinstance(value, expected_type):
        raise RulesConfigError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _parse_band(state: str, raw: Any) -> HotBand:
    if (
        not isinstance(raw, list)
        or len(raw) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw)
    ):
        raise RulesConfigError(f"Band for {state} must be a [low, high] pair of ints")
    low, high = raw
    if low > high:
        raise RulesConfigError(f"Band for {state} has low > high: {low} > {high}")
    if low < ZIP_MIN or high > ZIP_MAX:
        raise RulesConfigError(f"Band for {state} outside {ZIP_MIN:05d}-{ZIP_MAX:05d}")
    return HotBand(low=low, high=high)


def _parse_band_table(name: str, raw: dict[str, Any], states: tuple[str, ...]) -> dict[str, tuple[HotBand, ...]]:
    table: dict[str, tuple[HotBand, ...]] = {}
    for state in states:
        raw_bands = raw.get(state)
        if not isinstance(raw_bands, list) or not raw_bands:
            raise RulesConfigError(f"'{name}' must list at least one band for {state}")
        bands = tuple(_parse_band(state, b) for b in raw_bands)
        for i, band in enumerate(bands):
            for other in bands[i + 1 :]:
                if band.overlaps(other):
                    raise RulesConfigError(f"'{name}' bands overlap for {state}")
        table[state] = bands
    extra = sorted(set(raw) - set(states))
    if extra:
        raise RulesConfigError(f"'{name}' has states outside hot_states: {extra}")
    return table


def validate_rules(rules: HotZipRules) -> None:
    for state in rules.hot_states:
        spaces = rules.valid_spaces[state]
        for band in rules.hot_bands[state]:
            if not any(space.covers(band) for space in spaces):
                raise RulesConfigError(
                    f"Hot band {band.low:05d}-{band.high:05d} for {state} is outside its valid space"
                )
        if rules.hot_size(state) >= rules.valid_size(state):
            raise RulesConfigError(f"Hot bands cover the whole valid space for {state}")


def build_rules(payload: dict[str, Any]) -> HotZipRules:
    if not isinstance(payload, dict):
        raise RulesConfigError("Rules config must be a JSON object")

    raw_states = _require(payload, "hot_states", list)
    if not raw_states:
        raise RulesConfigError("Field 'hot_states' must not be empty")
    for state in raw_states:
        if not isinstance(state, str) or len(state) != 2 or not state.isascii() or not state.isupper():
            raise RulesConfigError(f"Invalid state code in hot_states: {state!r}")
    if len(set(raw_states)) != len(raw_states):
        raise RulesConfigError("Field 'hot_states' contains duplicates")
    hot_states = tuple(raw_states)

    hot_bands = _parse_band_table("hot_bands", _require(payload, "hot_bands", dict), hot_states)
    valid_spaces = _parse_band_table("valid_spaces", _require(payload, "valid_spaces", dict), hot_states)

    rules = HotZipRules(
        rule_id=_require(payload, "rule_id", str),
        description=_require(payload, "description", str),
        hot_states=hot_states,
        hot_bands=MappingProxyType(hot_bands),
        valid_spaces=MappingProxyType(valid_spaces),
    )
    validate_rules(rules)
    return rules


def load_rules(rule_id: str = DEFAULT_RULE_ID) -> HotZipRules:
    rules_path = _rules_dir() / f"{rule_id}.json"
    if not rules_path.exists():
        raise RulesConfigError(f"Unknown hot ZIP rule_id: {rule_id}")

    payload = json.loads(rules_path.read_text(encoding="utf-8"))
    rules = build_rules(payload)
    if rules.rule_id != rule_id:
        raise RulesConfigError(
            f"rule_id mismatch: requested '{rule_id}', config has '{rules.rule_id}'"
        )
    return rules


DEFAULT_RULES = load_rules(DEFAULT_RULE_ID)

__all__ = [
    "DEFAULT_RULES",
    "DEFAULT_RULE_ID",
    "RulesConfigError",
    "build_rules",
    "load_rules",
    "validate_rules",
]
