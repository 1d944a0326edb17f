"""Codec for the "SS NNNNN" ZIP wire format.

Responsibilities:
  - Validate ZIP strings, split them into state and number, and render them back.
Must not:
  - Know anything about hot bands or states we care about.

Invariants:
  - format_zip(parse(s).state, parse(s).n) == s for every valid s.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from thots.core.domain.models import ParsedZip

_ZIP_PATTERN = re.compile(r"[A-Z]{2} [0-9]{5}")
_STATE_PATTERN = re.compile(r"[A-Z]{2}")
_DIGITS_PATTERN = re.compile(r"[0-9]{5}")


def is_valid_format(s: Any) -> bool:
    return isinstance(s, str) and _ZIP_PATTERN.fullmatch(s) is not None


def is_valid_state(state: Any) -> bool:
    return isinstance(state, str) and _STATE_PATTERN.fullmatch(state) is not None


def is_valid_digits(digits: Any) -> bool:
    return isinstance(digits, str) and _DIGITS_PATTERN.fullmatch(digits) is not None


def parse(s: Any) -> Optional[ParsedZip]:
    if not is_valid_format(s):
        return None
    digits = s[3:]
    return ParsedZip(state=s[:2], digits=digits, n=int(digits))


def format_zip(state: str, n: int) -> str:
    # n must stay within 0-99999; wider values render more than five digits.
    return f"{state} {n:05d}"
