"""Audit practice ZIP generation against the rules table.

Purpose:
  - Report each state's hot coverage of its valid space.
  - Draw many practice ZIPs and compare the empirical hot rate with p_hot.
Inputs:
  - CLI args for seed, sample count, p_hot and rules id.
Outputs:
  - Text report or a JSON payload on stdout. Exit code 2 when the empirical
    hot rate is more than --max-sigma standard errors from p_hot.
Example:
  - python -m thots.cli.run_practice_audit --seed 1 --samples 5000 --json
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from typing import Any

import numpy as np

from thots.app_api.dto import PracticeSpec
from thots.core.classify.classifier import classify
from thots.core.codec.zip_codec import parse
from thots.core.domain.models import HotZipRules
from thots.core.domain.rules_config import DEFAULT_RULE_ID, load_rules
from thots.core.generate.generator import DEFAULT_P_HOT, random_practice_zip


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit practice ZIP hot rate and band coverage")
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--samples", type=int, default=2000)
    parser.add_argument("--p-hot", type=float, default=DEFAULT_P_HOT)
    parser.add_argument("--rules", default=DEFAULT_RULE_ID, help="Packaged rules id")
    parser.add_argument("--max-sigma", type=float, default=4.0)
    parser.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    return parser.parse_args(argv)


def build_spec(args: argparse.Namespace) -> PracticeSpec:
    if args.samples < 1:
        raise ValueError("samples must be >= 1")
    spec = PracticeSpec(p_hot=args.p_hot, seed=args.seed)
    spec.validate()
    return spec


def band_coverage(rules: HotZipRules) -> list[dict[str, Any]]:
    rows = []
    for state in rules.hot_states:
        hot_size = rules.hot_size(state)
        valid_size = rules.valid_size(state)
        rows.append(
            {
                "state": state,
                "hot_bands": [[b.low, b.high] for b in rules.hot_bands[state]],
                "hot_size": hot_size,
                "valid_size": valid_size,
                "hot_fraction": hot_size / valid_size,
            }
        )
    return rows


def sample_practice(p_hot: float, samples: int, seed: int, rules: HotZipRules) -> dict[str, Any]:
    rng = random.Random(seed).random
    zips = [random_practice_zip(p_hot, rng=rng, rules=rules) for _ in range(samples)]
    is_hot = np.array([classify(z, rules) for z in zips], dtype=bool)
    states = np.array([parse(z).state for z in zips])

    hot_rate = float(np.mean(is_hot)) if samples else 0.0
    std_err = float(np.sqrt(p_hot * (1.0 - p_hot) / samples)) if samples else 0.0
    sigma = abs(hot_rate - p_hot) / std_err if std_err > 0 else 0.0

    per_state: dict[str, dict[str, int]] = {}
    labels, counts = np.unique(states, return_counts=True)
    for label, count in zip(labels.tolist(), counts.tolist()):
        per_state[label] = {
            "drawn": int(count),
            "hot": int(np.sum(is_hot[states == label])),
        }

    return {
        "samples": samples,
        "p_hot": p_hot,
        "hot_rate": hot_rate,
        "std_err": std_err,
        "sigma": sigma,
        "per_state": per_state,
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        build_spec(args)
        rules = load_rules(args.rules)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    coverage = band_coverage(rules)
    stats = sample_practice(args.p_hot, args.samples, args.seed, rules)
    overall = "PASS" if stats["sigma"] <= args.max_sigma else "FAIL"
    exit_code = 0 if overall == "PASS" else 2

    if args.json:
        payload = {
            "rule_id": rules.rule_id,
            "seed": args.seed,
            "coverage": coverage,
            "practice": stats,
            "overall": overall,
            "exit_code": exit_code,
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(f"RULES: {rules.rule_id}")
        print("COVERAGE:")
        for row in coverage:
            print(
                f"  {row['state']}: hot={row['hot_size']} valid={row['valid_size']} "
                f"fraction={row['hot_fraction']:.4f}"
            )
        print("PRACTICE:")
        print(f"  samples={stats['samples']} seed={args.seed} p_hot={stats['p_hot']}")
        print(f"  hot_rate={stats['hot_rate']:.4f} std_err={stats['std_err']:.4f} sigma={stats['sigma']:.2f}")
        for state, row in stats["per_state"].items():
            print(f"  {state}: drawn={row['drawn']} hot={row['hot']}")
        print(f"OVERALL: {overall}")

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
