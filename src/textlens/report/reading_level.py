"""Interpretation of free-form reading level labels such as ``"7th grade"``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

MAX_GRADE = 20
DEFAULT_GRADE = 10

_GRADE_PATTERN = re.compile(r"(\d+)(?:th|st|nd|rd)?\s*grade|grade\s*(\d+)", re.IGNORECASE)
_NUMBER_PATTERN = re.compile(r"\d+")

_KEYWORD_GRADES: Tuple[Tuple[str, int], ...] = (
    ("graduate", 18),
    ("college", 14),
    ("high school", 11),
    ("middle school", 7),
    ("elementary", 5),
)


@dataclass(frozen=True)
class ReadingLevel:
    grade: int
    description: str


@dataclass(frozen=True)
class GradeBand:
    name: str
    min_grade: int
    max_grade: int


GRADE_BANDS: Tuple[GradeBand, ...] = (
    GradeBand("elementary", 0, 5),
    GradeBand("middle school", 6, 8),
    GradeBand("high school", 9, 12),
    GradeBand("college", 13, 16),
    GradeBand("graduate", 17, MAX_GRADE),
)


def parse_reading_level(label: str) -> ReadingLevel:
    """Extract a numeric grade from ``label``.

    Explicit grades win, then school-stage keywords, then any bare number
    between 0 and 20.  Anything else is treated as high-school level.
    """

    match = _GRADE_PATTERN.search(label)
    if match:
        return ReadingLevel(int(match.group(1) or match.group(2)), label)

    lowered = label.lower()
    for keyword, grade in _KEYWORD_GRADES:
        if keyword in lowered:
            return ReadingLevel(grade, label)

    number = _NUMBER_PATTERN.search(label)
    if number:
        grade = int(number.group(0))
        if 0 <= grade <= MAX_GRADE:
            return ReadingLevel(grade, label)

    return ReadingLevel(DEFAULT_GRADE, label)


def grade_band(grade: int) -> GradeBand:
    """Return the school-stage band containing ``grade``."""

    for band in GRADE_BANDS[:-1]:
        if grade <= band.max_grade:
            return band
    return GRADE_BANDS[-1]


def grade_percentage(grade: int) -> float:
    """Position of ``grade`` on a 0-100 scale capped at grade 20."""

    return min(grade / MAX_GRADE * 100, 100.0)


__all__ = [
    "DEFAULT_GRADE",
    "GRADE_BANDS",
    "GradeBand",
    "MAX_GRADE",
    "ReadingLevel",
    "grade_band",
    "grade_percentage",
    "parse_reading_level",
]
