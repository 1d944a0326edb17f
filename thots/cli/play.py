"""Play the ZIP guessing game in a terminal.

Purpose:
  - Show a practice ZIP, read a hot/not guess, reveal the verdict, repeat.
Inputs:
  - CLI args for seed, hot probability and number of rounds.
  - Guesses from stdin: y (hot), n (not hot), q (quit).
Outputs:
  - Printed ZIPs, verdicts and a final score to stdout.
Example:
  - python -m thots.cli.play --seed 7 --rounds 5
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from thots.app_api.dto import PracticeSpec
from thots.app_api.facade import ThotsApplication
from thots.core.domain.enums import verdict_label
from thots.core.game.engine import score_guess
from thots.core.generate.generator import DEFAULT_P_HOT, set_generator_debug
from ._debug_utils import _dbg, _debug_sink

_GUESSES = {"y": True, "yes": True, "n": False, "no": False}


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="thots simulator: guess whether a ZIP is hot")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible rounds")
    parser.add_argument("--p-hot", type=float, default=DEFAULT_P_HOT, help="Probability a ZIP is hot")
    parser.add_argument("--rounds", type=int, default=10)
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def build_spec(args: argparse.Namespace) -> PracticeSpec:
    spec = PracticeSpec(p_hot=args.p_hot, seed=args.seed, rounds=args.rounds)
    spec.validate()
    return spec


def _read_guess(ask: Callable[[str], str]) -> bool | None:
    while True:
        answer = ask("hot? [y/n/q] ").strip().lower()
        if answer in ("q", "quit"):
            return None
        if answer in _GUESSES:
            return _GUESSES[answer]
        print("please answer y, n or q")


def play_rounds(app: ThotsApplication, rounds: int, ask: Callable[[str], str]) -> tuple[int, int]:
    correct = 0
    played = 0
    current = app.start()
    for i in range(rounds):
        print(f"[{i + 1}/{rounds}] {current.zip}")
        guess = _read_guess(ask)
        if guess is None:
            break

        revealed = app.click().round
        played += 1
        if score_guess(revealed, guess):
            correct += 1
        print(f"  {verdict_label(revealed.verdict)}")

        if i + 1 < rounds:
            current = app.click().round
    return correct, played


def main(argv: list[str] | None = None, ask: Callable[[str], str] = input) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        spec = build_spec(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _dbg(args, f"seed={spec.seed} p_hot={spec.p_hot} rounds={spec.rounds}")
    set_generator_debug(_debug_sink(args))
    try:
        app = ThotsApplication.from_seed(spec.seed, p_hot=spec.p_hot)
        try:
            correct, played = play_rounds(app, spec.rounds, ask)
        except EOFError:
            print()
            return 1
    finally:
        set_generator_debug(None)

    print(f"SCORE={correct}/{played}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
