"""Course, CourseModule and Lesson models."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from ..database import Base
from .enums import LessonType


class Course(Base):
    """Course model."""
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    subject = Column(String(100))
    grade_level = Column(String(50))
    teacher_id = Column(String(36), index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    modules = relationship(
        "CourseModule",
        back_populates="course",
        order_by="CourseModule.order_index",
        cascade="all, delete-orphan",
    )
    assignments = relationship("Assignment", back_populates="course", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Course(id={self.id}, title='{self.title}')>"

    @property
    def module_count(self):
        """Get count of modules in this course."""
        return len(self.modules)


class CourseModule(Base):
    """Ordered unit of lessons inside a course."""
    __tablename__ = "course_modules"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    course = relationship("Course", back_populates="modules")
    lessons = relationship(
        "Lesson",
        back_populates="module",
        order_by="Lesson.order_index",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<CourseModule(id={self.id}, title='{self.title}', order_index={self.order_index})>"

    @property
    def lesson_count(self):
        return len(self.lessons)


class Lesson(Base):
    """Lesson model."""
    __tablename__ = "lessons"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    module_id = Column(String(36), ForeignKey("course_modules.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, default="")
    duration_minutes = Column(Integer, default=0)
    lesson_type = Column(SQLEnum(LessonType), nullable=False, default=LessonType.reading)
    xp_reward = Column(Integer, default=0)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    module = relationship("CourseModule", back_populates="lessons")

    def __repr__(self):
        return f"<Lesson(id={self.id}, title='{self.title}')>"
