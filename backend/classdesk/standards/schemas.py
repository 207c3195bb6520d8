"""Request and response schemas for learning standards."""
import math
from typing import Optional

from pydantic import BaseModel, Field

from ..toolkit.items import LearningStandard


class StandardGroup(BaseModel):
    category: str
    standards: list[LearningStandard]


class StudentMastery(BaseModel):
    student_id: str
    student_name: Optional[str] = None
    average_grade: float
    graded_count: int


class StandardMastery(BaseModel):
    course_id: str
    standard: LearningStandard
    graded_count: int
    average_grade: Optional[float] = None
    students: list[StudentMastery]


class ChipSize(BaseModel):
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class ChipLayoutRequest(BaseModel):
    sizes: list[ChipSize]
    # Omit for a single unbounded row
    max_width: Optional[float] = Field(None, gt=0)
    spacing: float = Field(8.0, ge=0)

    def bound(self) -> float:
        return math.inf if self.max_width is None else self.max_width


class ChipPosition(BaseModel):
    x: float
    y: float


class ChipLayoutResponse(BaseModel):
    width: float
    height: float
    positions: list[ChipPosition]
