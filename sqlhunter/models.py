from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Occurrence:
    text: str
    line_no: int


@dataclass(frozen=True)
class Processed:
    path: str
    occurrences: tuple[Occurrence, ...] = ()


@dataclass(frozen=True)
class Skipped:
    path: str
    reason: str


FileOutcome = Union[Processed, Skipped]
