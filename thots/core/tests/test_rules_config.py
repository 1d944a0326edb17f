"""Tests for rules table loading and its load-time invariants."""

from __future__ import annotations

import copy
import dataclasses

import pytest

from thots.core.domain.models import HotBand
from thots.core.domain.rules_config import (
    DEFAULT_RULES,
    RulesConfigError,
    build_rules,
    load_rules,
)


def _payload() -> dict:
    return {
        "rule_id": "TEST",
        "description": "test rules",
        "hot_states": ["WA", "CA"],
        "hot_bands": {
            "WA": [[98600, 98699], [99080, 99459]],
            "CA": [[95500, 95509]],
        },
        "valid_spaces": {
            "WA": [[98000, 99499]],
            "CA": [[90000, 96199]],
        },
    }


def test_default_rules_states_in_order() -> None:
    assert DEFAULT_RULES.rule_id == "HOT_ZIP_V1"
    assert DEFAULT_RULES.hot_states == ("WA", "OR", "CA", "ID")


def test_default_rules_bands() -> None:
    assert DEFAULT_RULES.hot_bands["WA"] == (
        HotBand(98600, 98699),
        HotBand(98810, 98899),
        HotBand(99080, 99459),
    )
    assert DEFAULT_RULES.hot_bands["OR"] == (HotBand(97000, 97999),)
    assert DEFAULT_RULES.hot_bands["CA"] == (HotBand(95500, 95509),)
    assert DEFAULT_RULES.hot_bands["ID"] == (HotBand(83500, 83899),)


def test_every_hot_state_has_cold_room_in_valid_space() -> None:
    # Rejection sampling for cold practice ZIPs relies on this.
    for state in DEFAULT_RULES.hot_states:
        assert DEFAULT_RULES.hot_size(state) < DEFAULT_RULES.valid_size(state)
        for band in DEFAULT_RULES.hot_bands[state]:
            assert any(space.covers(band) for space in DEFAULT_RULES.valid_spaces[state])


def test_default_rules_are_immutable() -> None:
    with pytest.raises(TypeError):
        DEFAULT_RULES.hot_bands["TX"] = (HotBand(0, 1),)  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_RULES.hot_states = ("TX",)  # type: ignore[misc]


def test_load_rules_unknown_id() -> None:
    with pytest.raises(RulesConfigError):
        load_rules("HOT_ZIP_V0")


def test_build_rules_accepts_valid_payload() -> None:
    rules = build_rules(_payload())
    assert rules.hot_states == ("WA", "CA")
    assert rules.hot_size("WA") == 100 + 380
    assert rules.valid_size("CA") == 6200


def test_build_rules_rejects_missing_field() -> None:
    payload = _payload()
    del payload["valid_spaces"]
    with pytest.raises(RulesConfigError, match="valid_spaces"):
        build_rules(payload)


def test_build_rules_rejects_overlapping_bands() -> None:
    payload = _payload()
    payload["hot_bands"]["WA"] = [[98600, 98699], [98650, 98700]]
    with pytest.raises(RulesConfigError, match="overlap"):
        build_rules(payload)


def test_build_rules_rejects_hot_band_outside_valid_space() -> None:
    payload = _payload()
    payload["hot_bands"]["CA"] = [[96100, 96300]]
    with pytest.raises(RulesConfigError, match="outside its valid space"):
        build_rules(payload)


def test_build_rules_rejects_hot_covering_whole_valid_space() -> None:
    payload = copy.deepcopy(_payload())
    payload["valid_spaces"]["CA"] = [[95500, 95509]]
    with pytest.raises(RulesConfigError, match="whole valid space"):
        build_rules(payload)


@pytest.mark.parametrize(
    "band",
    [[100, 50], [-1, 10], [99990, 100000], [1, 2, 3], ["1", "2"]],
)
def test_build_rules_rejects_bad_band(band) -> None:
    payload = _payload()
    payload["hot_bands"]["CA"] = [band]
    with pytest.raises(RulesConfigError):
        build_rules(payload)


def test_build_rules_rejects_bad_state_codes() -> None:
    payload = _payload()
    payload["hot_states"] = ["WA", "ca"]
    with pytest.raises(RulesConfigError, match="Invalid state code"):
        build_rules(payload)

    payload = _payload()
    payload["hot_states"] = ["WA", "WA"]
    with pytest.raises(RulesConfigError, match="duplicates"):
        build_rules(payload)


def test_build_rules_rejects_band_table_for_unknown_state() -> None:
    payload = _payload()
    payload["hot_bands"]["TX"] = [[73301, 73301]]
    with pytest.raises(RulesConfigError, match="outside hot_states"):
        build_rules(payload)
