"""Grade preview and CSV export for a course."""
import logging
import os
from datetime import date
from pathlib import Path
from typing import Optional

from ..assignments.service import AssignmentService
from ..models import Course
from ..services import BaseService
from ..toolkit.csv_export import write_grades_csv
from ..toolkit.grade_filter import average_grade, completion_ratio, filter_graded_items
from ..toolkit.items import DateRange, GradedItem
from .schemas import GradePreview

logger = logging.getLogger(__name__)


class GradeExportService(BaseService):

    def __init__(self, db, export_dir: Optional[str] = None):
        super().__init__(db)
        self.export_dir = export_dir or os.getenv("EXPORT_DIR", "exports")

    def filtered_items(self, course_id: str, date_range: Optional[DateRange] = None) -> list[GradedItem]:
        items = AssignmentService(self.db).graded_items(course_id)
        return filter_graded_items(items, course_id, date_range)

    def preview(self, course_id: str, date_range: Optional[DateRange] = None) -> GradePreview:
        """The rows an export would contain, plus completion and average over the course."""
        course = self.get_or_raise(Course, course_id)
        all_items = AssignmentService(self.db).graded_items(course_id)
        items = filter_graded_items(all_items, course_id, date_range)
        return GradePreview(
            course_id=course.id,
            course_title=course.title,
            count=len(items),
            completion_ratio=completion_ratio(all_items),
            average_grade=average_grade(items),
            items=items,
        )

    def export_csv(
        self,
        course_id: str,
        date_range: Optional[DateRange] = None,
        on: Optional[date] = None,
    ) -> Path:
        """Write the course's grade CSV and return its path.

        Raises:
            NotFoundError: If the course does not exist.
            NoDataToExportError: If no submitted work falls in the window.
            OperationFailedError: If the file cannot be written.
        """
        course = self.get_or_raise(Course, course_id)
        items = self.filtered_items(course_id, date_range)
        logger.info(f"Exporting {len(items)} grades for course '{course.title}'")
        return write_grades_csv(items, course.title, self.export_dir, on=on)
