"""Request and response schemas for assignments and submissions."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AssignmentCreate(BaseModel):
    course_id: str
    title: str = Field(..., max_length=255)
    instructions: str = ""
    due_date: datetime
    points: int = Field(100, ge=0)
    standard_ids: list[str] = []


class AssignmentUpdate(BaseModel):
    """Partial update from the edit-assignment screen; omitted fields are left alone."""
    title: Optional[str] = Field(None, max_length=255)
    instructions: Optional[str] = None
    due_date: Optional[datetime] = None
    points: Optional[int] = Field(None, ge=0)


class AssignmentDuplicate(BaseModel):
    course_id: Optional[str] = None


class StandardsTag(BaseModel):
    standard_ids: list[str]


class AssignmentResponse(BaseModel):
    id: str
    course_id: str
    title: str
    instructions: Optional[str]
    due_date: datetime
    points: int
    xp_reward: int
    standard_ids: list[str] = []
    submission_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class SubmissionCreate(BaseModel):
    student_id: str
    student_name: Optional[str] = None
    submitted: bool = True


class GradeUpdate(BaseModel):
    grade: float = Field(..., ge=0, le=100)
    feedback: Optional[str] = None


class SubmissionResponse(BaseModel):
    id: str
    assignment_id: str
    student_id: str
    student_name: Optional[str]
    submitted: bool
    submitted_at: Optional[datetime]
    grade: Optional[float]
    feedback: Optional[str]

    model_config = ConfigDict(from_attributes=True)
