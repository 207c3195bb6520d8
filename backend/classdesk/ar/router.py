"""Routes for the AR library."""
import re
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth import get_current_teacher
from ..database import get_db
from ..errors import NotFoundError, to_http_exception
from ..models import Lesson
from .catalog import ARCategory, ARResource, categories_in_use, get_resource, list_resources, match_keywords

router = APIRouter(prefix="/api/ar", tags=["AR Library"], dependencies=[Depends(get_current_teacher)])

# Words shorter than this are ignored when matching lessons
MIN_KEYWORD_LENGTH = 4


def lesson_keywords(title: str) -> list[str]:
    return [word for word in re.findall(r"[A-Za-z]+", title) if len(word) >= MIN_KEYWORD_LENGTH]


@router.get("/resources", response_model=list[ARResource])
async def list_ar_resources(
    category: Optional[ARCategory] = Query(None),
    q: Optional[str] = Query(None),
):
    return list_resources(category, q)


@router.get("/categories", response_model=list[ARCategory])
async def list_ar_categories():
    return categories_in_use()


@router.get("/resources/{resource_id}", response_model=ARResource)
async def get_ar_resource(resource_id: str):
    resource = get_resource(resource_id)
    if resource is None:
        raise to_http_exception(NotFoundError("ARResource", resource_id))
    return resource


@router.get("/lessons/{lesson_id}/resources", response_model=list[ARResource])
async def resources_for_lesson(lesson_id: str, db: Session = Depends(get_db)):
    """AR resources that fit a lesson, matched on the words of its title."""
    lesson = db.get(Lesson, lesson_id)
    if lesson is None:
        raise to_http_exception(NotFoundError("Lesson", lesson_id))
    return match_keywords(lesson_keywords(lesson.title))
