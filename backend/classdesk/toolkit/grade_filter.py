"""Course and date-window filters over graded work and attendance."""
from typing import Iterable, Optional

from .items import AttendanceEntry, DateRange, GradedItem


def filter_graded_items(
    items: Iterable[GradedItem],
    course_id: str,
    date_range: Optional[DateRange] = None,
) -> list[GradedItem]:
    """Submitted items for ``course_id`` whose due date falls in ``date_range``.

    Never raises for an unknown course; the result is simply empty. Input order
    is preserved.
    """
    return [
        item for item in items
        if item.course_id == course_id
        and item.submitted
        and (date_range is None or date_range.contains(item.due_date))
    ]


def filter_attendance(
    records: Iterable[AttendanceEntry],
    course_id: str,
    date_range: Optional[DateRange] = None,
) -> list[AttendanceEntry]:
    """Attendance records for ``course_id`` taken inside ``date_range``."""
    return [
        record for record in records
        if record.course_id == course_id
        and (date_range is None or date_range.contains(record.date))
    ]


def completion_ratio(items: Iterable[GradedItem]) -> float:
    """Share of items that were submitted; 0.0 for an empty collection."""
    total = 0
    submitted = 0
    for item in items:
        total += 1
        if item.submitted:
            submitted += 1
    if total == 0:
        return 0.0
    return submitted / total


def average_grade(items: Iterable[GradedItem]) -> Optional[float]:
    """Mean of the graded items, or None when nothing has a grade yet."""
    grades = [item.grade for item in items if item.grade is not None]
    if not grades:
        return None
    return sum(grades) / len(grades)
