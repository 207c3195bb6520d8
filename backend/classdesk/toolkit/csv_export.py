"""
Grade export to CSV.

Rows are built from already-filtered graded items, so the exported row count
always equals the number of items passed in.

Example:
    >>> items = filter_graded_items(all_items, course_id)
    >>> path = write_grades_csv(items, "Algebra I", "exports")
"""

import csv
import io
import logging
import os
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..errors import NoDataToExportError, OperationFailedError
from .items import GradedItem
from .letter_grades import letter_grade, UNGRADED_LETTER

logger = logging.getLogger(__name__)

CSV_HEADER = ["Student Name", "Assignment", "Grade", "Letter Grade", "Due Date", "Feedback"]
UNKNOWN_STUDENT = "Unknown Student"
NOT_GRADED = "Not Graded"
FORMULA_PREFIXES = ("=", "+", "-", "@")


def grade_row(item: GradedItem) -> list[str]:
    """Render one graded item as a CSV row."""
    if item.grade is not None:
        grade = f"{item.grade:.1f}%"
        letter = letter_grade(item.grade)
    else:
        grade = NOT_GRADED
        letter = UNGRADED_LETTER
    return [
        neutralize_formula(item.student_name or UNKNOWN_STUDENT),
        neutralize_formula(item.title),
        grade,
        letter,
        item.due_date.date().isoformat(),
        neutralize_formula(item.feedback or ""),
    ]


def neutralize_formula(text: str) -> str:
    """Quote free text that a spreadsheet would otherwise evaluate as a formula."""
    if text.startswith(FORMULA_PREFIXES):
        return f"'{text}"
    return text


def render_grades_csv(items: Sequence[GradedItem]) -> str:
    """
    Render graded items as CSV text with a header row.

    Raises:
        NoDataToExportError: If ``items`` is empty.
    """
    if not items:
        raise NoDataToExportError()

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(grade_row(item) for item in items)
    return buffer.getvalue()


def export_filename(course_title: str, on: Optional[date] = None) -> str:
    """File name for a course's grade export, e.g. ``Grades_Algebra_I_2024-05-01.csv``."""
    on = on or date.today()
    return get_safe_filename(f"Grades_{course_title or 'Course'}_{on.isoformat()}.csv")


def write_grades_csv(
    items: Sequence[GradedItem],
    course_title: str,
    export_dir: str,
    on: Optional[date] = None,
) -> Path:
    """
    Write the grade CSV for a course into ``export_dir``.

    An existing export with the same name is kept; the new file gets a
    numeric suffix instead.

    Returns:
        Path: Path to the written file.

    Raises:
        NoDataToExportError: If ``items`` is empty.
        OperationFailedError: If the file cannot be written.
    """
    content = render_grades_csv(items)
    directory = Path(export_dir).resolve()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        file_path = _unique_path(directory, export_filename(course_title, on))
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        error_msg = f"Failed to write grade export for {course_title}: {str(e)}"
        logger.error(error_msg)
        raise OperationFailedError() from e

    logger.info(f"Exported {len(items)} grade rows to {file_path}")
    return file_path


def parse_grades_csv(content: str) -> list[dict[str, str]]:
    """Read an exported CSV back into dictionaries keyed by header."""
    return list(csv.DictReader(io.StringIO(content)))


def _unique_path(directory: Path, filename: str) -> Path:
    """Path in ``directory`` that does not collide with an existing file."""
    file_path = directory / filename
    if not file_path.exists():
        return file_path

    name, ext = os.path.splitext(filename)
    counter = 1
    while True:
        candidate = directory / f"{name}_{counter}{ext}"
        if not candidate.exists():
            return candidate
        counter += 1


def get_safe_filename(filename: str) -> str:
    """
    Return a safe version of the filename.

    Example:
        >>> get_safe_filename("Grades_Art & Design_2024-05-01.csv")
        'Grades_Art___Design_2024-05-01.csv'
    """
    if not filename or not isinstance(filename, str):
        return 'unnamed_export.csv'

    keep_chars = ('.', '_', '-')
    safe_chars = []
    for c in filename:
        if c.isalnum() or c in keep_chars:
            safe_chars.append(c)
        elif c.isspace() or c in ('*', '/', '\\', ':', '!', '@', '#', '$', '%', '^', '&', '(', ')', '+', '=', '[', ']', '{', '}', ';', "'", ',', '~', '`', '|', '"', '<', '>', '?'):
            safe_chars.append('_')
        # Other characters are removed

    safe_name = ''.join(safe_chars).strip('_.- ')
    if not safe_name:
        return 'unnamed_export.csv'

    max_length = 255
    if len(safe_name) > max_length:
        name, ext = os.path.splitext(safe_name)
        name = name[:max_length - len(ext) - 1]
        safe_name = f"{name}{ext}"

    return safe_name

