"""Test cases for the graded-item and attendance filters."""

import pytest
from datetime import date, datetime, timedelta, timezone

from classdesk.models import AttendanceStatus
from classdesk.toolkit import (
    GradedItem, AttendanceEntry, DateRange,
    filter_graded_items, filter_attendance, completion_ratio, average_grade,
)


def make_item(index, course_id="course-x", grade=None, submitted=True, due=None):
    return GradedItem(
        id=f"item-{index}",
        course_id=course_id,
        assignment_id="assignment-1",
        title=f"Quiz {index}",
        due_date=due or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc) + timedelta(days=index),
        grade=grade,
        student_id=f"student-{index}",
        student_name=f"Student {index}",
        submitted=submitted,
    )


@pytest.fixture
def five_graded_items():
    return [make_item(i, grade=grade) for i, grade in enumerate([90, 72, 81, 95, 60])]


class TestFilterGradedItems:
    """Test cases for filter_graded_items."""

    def test_all_submitted_items_in_course_are_kept(self, five_graded_items):
        result = filter_graded_items(five_graded_items, "course-x")
        assert len(result) == 5
        assert [item.grade for item in result] == [90, 72, 81, 95, 60]

    def test_unknown_course_gives_empty_result(self, five_graded_items):
        assert filter_graded_items(five_graded_items, "course-missing") == []

    def test_other_courses_are_dropped(self, five_graded_items):
        items = five_graded_items + [make_item(9, course_id="course-y", grade=100)]
        result = filter_graded_items(items, "course-y")
        assert [item.id for item in result] == ["item-9"]

    def test_unsubmitted_items_are_dropped(self):
        items = [make_item(0, grade=80), make_item(1, submitted=False)]
        result = filter_graded_items(items, "course-x")
        assert [item.id for item in result] == ["item-0"]

    def test_date_range_bounds_are_inclusive(self, five_graded_items):
        # Items are due May 1 through May 5 at noon UTC
        window = DateRange(start=date(2024, 5, 2), end=date(2024, 5, 4))
        result = filter_graded_items(five_graded_items, "course-x", window)
        assert [item.id for item in result] == ["item-1", "item-2", "item-3"]

    def test_naive_due_dates_are_treated_as_utc(self):
        item = make_item(0, due=datetime(2024, 5, 10, 23, 30))
        window = DateRange(
            start=datetime(2024, 5, 10, 23, 0, tzinfo=timezone.utc),
            end=datetime(2024, 5, 11, 0, 0, tzinfo=timezone.utc),
        )
        assert filter_graded_items([item], "course-x", window) == [item]

    def test_open_ended_range(self, five_graded_items):
        window = DateRange(start=date(2024, 5, 4))
        result = filter_graded_items(five_graded_items, "course-x", window)
        assert len(result) == 2


class TestDateRange:
    """Test cases for DateRange."""

    def test_start_after_end_is_rejected(self):
        with pytest.raises(ValueError):
            DateRange(start=date(2024, 5, 3), end=date(2024, 5, 1))

    def test_single_day_covers_whole_day(self):
        window = DateRange(start=date(2024, 5, 1), end=date(2024, 5, 1))
        assert window.contains(datetime(2024, 5, 1, 23, 59, tzinfo=timezone.utc))
        assert not window.contains(datetime(2024, 5, 2, 0, 0, tzinfo=timezone.utc))


class TestFilterAttendance:
    """Test cases for filter_attendance."""

    def test_filters_by_course_and_date(self):
        entries = [
            AttendanceEntry(id="1", course_id="c1", student_id="s1", date=date(2024, 5, 1)),
            AttendanceEntry(id="2", course_id="c1", student_id="s1", date=date(2024, 5, 8),
                            status=AttendanceStatus.absent),
            AttendanceEntry(id="3", course_id="c2", student_id="s1", date=date(2024, 5, 1)),
        ]
        window = DateRange(start=date(2024, 5, 1), end=date(2024, 5, 7))
        result = filter_attendance(entries, "c1", window)
        assert [entry.id for entry in result] == ["1"]

    def test_unknown_course_gives_empty_result(self):
        entry = AttendanceEntry(id="1", course_id="c1", student_id="s1", date=date(2024, 5, 1))
        assert filter_attendance([entry], "c9") == []


class TestAggregates:
    """Test cases for completion_ratio and average_grade."""

    def test_completion_ratio(self):
        items = [make_item(0), make_item(1), make_item(2), make_item(3, submitted=False)]
        assert completion_ratio(items) == 0.75

    def test_completion_ratio_of_nothing_is_zero(self):
        assert completion_ratio([]) == 0.0

    def test_average_grade_skips_ungraded(self):
        items = [make_item(0, grade=90), make_item(1, grade=70), make_item(2)]
        assert average_grade(items) == 80

    def test_average_grade_without_grades_is_none(self):
        assert average_grade([make_item(0)]) is None
