"""Shared enums for models, schemas and the toolkit."""
import enum
from typing import Optional


class AttendanceStatus(enum.Enum):
    present = "present"
    absent = "absent"
    tardy = "tardy"
    excused = "excused"

    @classmethod
    def parse(cls, value: str) -> Optional["AttendanceStatus"]:
        """Look up a status by value, ignoring case and surrounding spaces."""
        lowered = value.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return None


class PeerReviewStatus(enum.Enum):
    assigned = "assigned"
    in_progress = "in_progress"
    completed = "completed"

    @property
    def rank(self) -> int:
        """Position in the assigned -> in_progress -> completed lifecycle."""
        return list(PeerReviewStatus).index(self)

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class LessonType(enum.Enum):
    reading = "reading"
    video = "video"
    activity = "activity"
    quiz = "quiz"
