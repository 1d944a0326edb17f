"""Classify ZIP strings from the command line.

Purpose:
  - Print the hot/not verdict for each ZIP argument.
Inputs:
  - One or more "SS NNNNN" ZIP strings (quote them; they contain a space).
Outputs:
  - One "<zip>\\t<VERDICT>" line per argument; malformed input is NOT_HOT.
Example:
  - python -m thots.cli.classify_zip "WA 98666" "TX 73301"
"""

from __future__ import annotations

import argparse
import sys

from thots.core.classify.classifier import verdict_for
from thots.core.domain.rules_config import DEFAULT_RULE_ID, RulesConfigError, load_rules


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify ZIP strings as HOT or NOT_HOT")
    parser.add_argument("zips", nargs="+", help='ZIP strings like "WA 98666"')
    parser.add_argument("--rules", default=DEFAULT_RULE_ID, help="Packaged rules id")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        rules = load_rules(args.rules)
    except RulesConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    for zip_string in args.zips:
        print(f"{zip_string}\t{verdict_for(zip_string, rules).value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
