"""Tests for the UI-facing application facade and practice spec."""

from __future__ import annotations

import pytest

from thots.app_api.dto import PracticeSpec
from thots.app_api.facade import ThotsApplication
from thots.core.domain.enums import GameState, Verdict


def _zero() -> float:
    return 0.0


def test_generate_practice_zip_default_p_hot() -> None:
    app = ThotsApplication(_zero)
    assert app.generate_practice_zip() == "WA 98600"


def test_generate_practice_zip_cold() -> None:
    app = ThotsApplication(_zero)
    assert app.generate_practice_zip(0.0) == "WA 98000"
    assert app.classify("WA 98000") is False


def test_classify_passthrough() -> None:
    app = ThotsApplication(_zero)
    assert app.classify("CA 95505") is True
    assert app.classify("CA 95510") is False
    assert app.classify("not a zip") is False


def test_from_seed_is_reproducible() -> None:
    a = ThotsApplication.from_seed(42)
    b = ThotsApplication.from_seed(42)
    zips_a = [a.generate_practice_zip() for _ in range(25)]
    zips_b = [b.generate_practice_zip() for _ in range(25)]
    assert zips_a == zips_b


def test_click_without_start_starts_then_reveals() -> None:
    app = ThotsApplication(_zero)
    step = app.click()
    assert step.final_state == GameState.SHOWING_VERDICT
    assert app.current_round.verdict == Verdict.HOT


def test_start_click_cycle() -> None:
    app = ThotsApplication(_zero, p_hot=0.0)
    first = app.start()
    assert first.zip == "WA 98000"
    assert first.game_state == GameState.AWAITING_GUESS

    assert app.click().round.verdict == Verdict.NOT_HOT
    nxt = app.click()
    assert nxt.final_state == GameState.AWAITING_GUESS
    assert app.current_round == nxt.round


def test_practice_spec_defaults_validate() -> None:
    spec = PracticeSpec()
    spec.validate()
    assert spec.p_hot == 0.5
    assert spec.rounds == 10
    assert spec.seed is None


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"p_hot": -0.1}, "p_hot must be within"),
        ({"p_hot": 1.5}, "p_hot must be within"),
        ({"p_hot": float("nan")}, "p_hot must be within"),
        ({"p_hot": True}, "p_hot must be a number"),
        ({"rounds": 0}, "rounds must be >= 1"),
        ({"seed": -1}, "seed must be >= 0"),
    ],
)
def test_practice_spec_rejects_bad_values(kwargs, message) -> None:
    with pytest.raises(ValueError, match=message):
        PracticeSpec(**kwargs).validate()
