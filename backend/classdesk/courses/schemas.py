"""Request and response schemas for courses, modules and lessons."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import LessonType


class CourseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    subject: Optional[str] = None
    grade_level: Optional[str] = None


class LessonCreate(BaseModel):
    title: str = Field(..., max_length=255)
    content: str = ""
    duration_minutes: int = Field(15, ge=0)
    lesson_type: LessonType = LessonType.reading
    xp_reward: int = Field(10, ge=0)


class LessonUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, ge=0)
    lesson_type: Optional[LessonType] = None
    xp_reward: Optional[int] = Field(None, ge=0)


class LessonResponse(BaseModel):
    id: str
    module_id: str
    title: str
    content: Optional[str]
    duration_minutes: int
    lesson_type: LessonType
    xp_reward: int
    order_index: int

    model_config = ConfigDict(from_attributes=True)


class ModuleCreate(BaseModel):
    title: str = Field(..., max_length=255)


class ModuleUpdate(BaseModel):
    title: str = Field(..., max_length=255)


class ModuleReorder(BaseModel):
    module_ids: list[str]


class ModuleResponse(BaseModel):
    id: str
    course_id: str
    title: str
    order_index: int
    lessons: list[LessonResponse] = []

    model_config = ConfigDict(from_attributes=True)


class CourseResponse(BaseModel):
    id: str
    title: str
    subject: Optional[str]
    grade_level: Optional[str]
    teacher_id: Optional[str]
    created_at: Optional[datetime] = None
    modules: list[ModuleResponse] = []

    model_config = ConfigDict(from_attributes=True)
