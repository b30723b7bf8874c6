
"""
Record filtering.

Four operator-supplied criteria narrow the loaded records: chromosome,
reference allele and alternate allele match as case-insensitive substrings,
and the position criterion is parsed into a predicate that matches either one
exact position or an inclusive range.

Malformed position expressions impose no constraint at all. This permissive
fallback is part of the behavior, not an error path.
"""

from typing import Iterable, List, Optional, Union
from dataclasses import dataclass, fields
from enum import Enum
import re

from vcfview.records import Record

_UINT_RE = re.compile(r"[0-9]+")


class FilterField(Enum):
    CHROM = "chromosome"
    REF = "reference"
    ALT = "alternate"
    POS = "position"

    @property
    def label(self) -> str:
        return self.name


@dataclass
class FilterCriteria:
    """Current filter values; an empty string means no constraint."""
    chromosome: str = ""
    reference: str = ""
    alternate: str = ""
    position: str = ""

    def get(self, field: FilterField) -> str:
        return getattr(self, field.value)

    def set(self, field: FilterField, value: str):
        setattr(self, field.value, value)

    def clear(self):
        for f in fields(self):
            setattr(self, f.name, "")

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class Unconstrained:

    def matches(self, position: str) -> bool:
        return True


@dataclass(frozen=True)
class Exact:
    value: int

    def matches(self, position: str) -> bool:
        # textual comparison against the canonical decimal form
        return position == str(self.value)


@dataclass(frozen=True)
class Range:
    low: int
    high: int

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"Range low ({self.low}) must not exceed high ({self.high})")

    def matches(self, position: str) -> bool:
        pos = parse_uint(position)
        if pos is None:
            return False
        return self.low <= pos <= self.high


PositionPredicate = Union[Unconstrained, Exact, Range]


def parse_uint(text: str) -> Optional[int]:
    """Parse a non-negative decimal integer, or return None."""
    if _UINT_RE.fullmatch(text):
        return int(text)
    return None


def parse_position_filter(expression: str) -> PositionPredicate:
    """Parse a position filter expression.

    Accepts "" (no constraint), "N" (exact) and "LOW-HIGH" (inclusive range).
    Anything else, including "HIGH-LOW" and expressions with more than one
    hyphen, yields Unconstrained rather than raising.
    """
    expression = expression.strip()
    if not expression:
        return Unconstrained()

    value = parse_uint(expression)
    if value is not None:
        return Exact(value)

    if expression.count('-') == 1:
        lo, hi = (part.strip() for part in expression.split('-'))
        low, high = parse_uint(lo), parse_uint(hi)
        if low is not None and high is not None and low <= high:
            return Range(low, high)

    return Unconstrained()


def _contains(value: str, criterion: str) -> bool:
    return not criterion or criterion.lower() in value.lower()


def record_matches(record: Record, criteria: FilterCriteria, predicate: Optional[PositionPredicate] = None) -> bool:

    if predicate is None:
        predicate = parse_position_filter(criteria.position)

    return (_contains(record.chromosome, criteria.chromosome)
            and _contains(record.reference_allele, criteria.reference)
            and _contains(record.alternate_allele, criteria.alternate)
            and predicate.matches(record.position))


def apply_filters(records: Iterable[Record], criteria: FilterCriteria) -> List[Record]:
    """Return the records passing every active criterion, in original order."""
    predicate = parse_position_filter(criteria.position)
    return [r for r in records if record_matches(r, criteria, predicate)]
