"""Percentage to letter grade conversion."""
from typing import Optional

# (minimum percentage, letter), highest first
LETTER_SCALE = (
    (97.0, "A+"),
    (93.0, "A"),
    (90.0, "A-"),
    (87.0, "B+"),
    (83.0, "B"),
    (80.0, "B-"),
    (77.0, "C+"),
    (73.0, "C"),
    (70.0, "C-"),
    (67.0, "D+"),
    (63.0, "D"),
    (60.0, "D-"),
)

UNGRADED_LETTER = "--"


def letter_grade(percentage: Optional[float]) -> str:
    if percentage is None:
        return UNGRADED_LETTER
    for minimum, letter in LETTER_SCALE:
        if percentage >= minimum:
            return letter
    return "F"
