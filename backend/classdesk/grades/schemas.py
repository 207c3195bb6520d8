"""Response schemas for the grade export screen."""
from typing import Optional

from pydantic import BaseModel

from ..toolkit.items import GradedItem


class GradePreview(BaseModel):
    course_id: str
    course_title: str
    count: int
    completion_ratio: float
    average_grade: Optional[float] = None
    items: list[GradedItem]
