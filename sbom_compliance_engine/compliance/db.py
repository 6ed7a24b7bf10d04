"""
Record store — the atomic scored result of one check, and the ordered
collection of records produced while evaluating one standard.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator

from .keys import CheckKey

MAX_SCORE = 10.0
MIN_SCORE = 0.0


def clamp_score(value: float) -> float:
    """Clamp into [0, 10]; NaN becomes 0."""
    if value is None or math.isnan(value):
        return MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, float(value)))


@dataclass
class Record:
    """
    Result of one check against one document or component.
    """
    check_key: CheckKey                  # Rule that produced this record
    check_value: str = ""                # Observed value, verbatim
    score: float = 0.0                   # 10.0 pass, 0.0 fail
    id: str = ""                         # Category / grouping label
    required: bool = True                # Counts toward the mandatory subset
    ignore: bool = False                 # Excluded from aggregation

    def __post_init__(self):
        self.score = clamp_score(self.score)
        self.check_value = "" if self.check_value is None else str(self.check_value)

    @property
    def passed(self) -> bool:
        return self.score >= MAX_SCORE

    def to_dict(self) -> dict:
        return {
            "check_key": self.check_key.name,
            "check_value": self.check_value,
            "score": self.score,
            "id": self.id,
            "required": self.required,
            "ignore": self.ignore,
        }


def new_record(
    key: CheckKey,
    value: str,
    passed: bool,
    category: str,
    required: bool = True,
) -> Record:
    return Record(
        check_key=key,
        check_value=value,
        score=MAX_SCORE if passed else MIN_SCORE,
        id=category,
        required=required,
    )


class DB:
    """
    Append-only, insertion-ordered record collection for one
    (document, standard) evaluation.
    """

    def __init__(self, records: Iterable[Record] = ()):
        self._records: list[Record] = []
        self._lock = threading.Lock()
        self.add_all(records)

    def add(self, record: Record):
        with self._lock:
            self._records.append(record)

    def add_all(self, records: Iterable[Record]):
        items = list(records)
        with self._lock:
            self._records.extend(items)

    @property
    def records(self) -> list[Record]:
        with self._lock:
            return list(self._records)

    def by_key(self, key: CheckKey) -> list[Record]:
        return [r for r in self.records if r.check_key == key]

    def by_id(self, record_id: str) -> list[Record]:
        return [r for r in self.records if r.id == record_id]

    def required(self) -> list[Record]:
        return [r for r in self.records if r.required]

    def ids(self) -> list[str]:
        """Distinct record ids in order of first appearance."""
        return list(dict.fromkeys(r.id for r in self.records))

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DB):
            return NotImplemented
        return self.records == other.records
