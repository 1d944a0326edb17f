"""Domain models for parsed ZIPs and hot-ZIP rules.

Responsibilities:
  - Define immutable data carriers for a parsed ZIP, a numeric band, and a rules table.

Inputs/Outputs:
  - ParsedZip is produced by the codec and consumed by the classifier.
  - HotZipRules is produced by the rules loader and read by classifier and generator.

Invariants:
  - Models are frozen; rules tables are never mutated after load.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class ParsedZip:
    state: str
    digits: str
    n: int


@dataclass(frozen=True)
class HotBand:
    low: int
    high: int

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    def contains(self, n: int) -> bool:
        return self.low <= n <= self.high

    def covers(self, other: "HotBand") -> bool:
        return self.low <= other.low and other.high <= self.high

    def overlaps(self, other: "HotBand") -> bool:
        return self.low <= other.high and other.low <= self.high


@dataclass(frozen=True)
class HotZipRules:
    rule_id: str
    description: str
    hot_states: tuple[str, ...]
    hot_bands: Mapping[str, tuple[HotBand, ...]]
    valid_spaces: Mapping[str, tuple[HotBand, ...]]

    def is_hot_state(self, state: str) -> bool:
        return state in self.hot_states

    def hot_size(self, state: str) -> int:
        return sum(band.size for band in self.hot_bands.get(state, ()))

    def valid_size(self, state: str) -> int:
        return sum(band.size for band in self.valid_spaces.get(state, ()))
