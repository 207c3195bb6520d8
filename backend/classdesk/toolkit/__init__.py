"""
Pure, synchronous helpers behind the teacher screens.

Nothing in this package touches the database or the network.
"""

from .items import GradedItem, AttendanceEntry, PeerReviewAssignment, LearningStandard, DateRange
from .grade_filter import filter_graded_items, filter_attendance, completion_ratio, average_grade
from .review_stats import ReviewTally, tally_reviews
from .reviewer_assignment import assign_reviewers, MAX_REVIEWS_PER_SUBMISSION
from .flow_layout import compute_flow_layout, FlowLayout, Size, Point
from .letter_grades import letter_grade
from .csv_export import render_grades_csv, write_grades_csv, parse_grades_csv
from .records import build_attendance_records, build_assignment_record, normalize_date, normalize_timestamp

__all__ = [
    "GradedItem",
    "AttendanceEntry",
    "PeerReviewAssignment",
    "LearningStandard",
    "DateRange",
    "filter_graded_items",
    "filter_attendance",
    "completion_ratio",
    "average_grade",
    "ReviewTally",
    "tally_reviews",
    "assign_reviewers",
    "MAX_REVIEWS_PER_SUBMISSION",
    "compute_flow_layout",
    "FlowLayout",
    "Size",
    "Point",
    "letter_grade",
    "render_grades_csv",
    "write_grades_csv",
    "parse_grades_csv",
    "build_attendance_records",
    "build_assignment_record",
    "normalize_date",
    "normalize_timestamp",
]
