"""Routes for the standards browser and mastery view."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth import get_current_teacher
from ..database import get_db
from ..dependencies import date_range_query
from ..errors import NotFoundError, to_http_exception
from ..toolkit.flow_layout import compute_flow_layout
from ..toolkit.items import DateRange, LearningStandard
from ..toolkit.standards_catalog import get_standard, group_by_category, search_standards, subjects
from .schemas import (
    StandardGroup, StandardMastery, ChipLayoutRequest, ChipLayoutResponse, ChipPosition,
)
from .service import StandardsService

router = APIRouter(prefix="/api", tags=["Standards"], dependencies=[Depends(get_current_teacher)])


def get_standards_service(db: Session = Depends(get_db)) -> StandardsService:
    """Dependency to get an instance of StandardsService."""
    return StandardsService(db)


@router.get("/standards", response_model=list[LearningStandard])
async def list_standards(
    subject: Optional[str] = Query(None),
    q: Optional[str] = Query(None, description="Matches code, title, description or category"),
):
    return search_standards(subject, q)


@router.get("/standards/subjects", response_model=list[str])
async def list_subjects():
    return subjects()


@router.get("/standards/grouped", response_model=list[StandardGroup])
async def list_standards_grouped(subject: Optional[str] = Query(None), q: Optional[str] = Query(None)):
    """Standards grouped by category, categories in natural order."""
    return [
        StandardGroup(category=category, standards=members)
        for category, members in group_by_category(search_standards(subject, q))
    ]


@router.get("/standards/{standard_id}", response_model=LearningStandard)
async def get_learning_standard(standard_id: str):
    standard = get_standard(standard_id)
    if standard is None:
        raise to_http_exception(NotFoundError("LearningStandard", standard_id))
    return standard


@router.post("/standards/chip-layout", response_model=ChipLayoutResponse)
async def chip_layout(data: ChipLayoutRequest):
    """Lay out standard chips in wrapped rows."""
    layout = compute_flow_layout(
        [(size.width, size.height) for size in data.sizes],
        max_width=data.bound(),
        spacing=data.spacing,
    )
    return ChipLayoutResponse(
        width=layout.size.width,
        height=layout.size.height,
        positions=[ChipPosition(x=point.x, y=point.y) for point in layout.positions],
    )


@router.get("/courses/{course_id}/standards/{standard_id}/mastery", response_model=StandardMastery)
async def standard_mastery(
    course_id: str,
    standard_id: str,
    date_range: Optional[DateRange] = Depends(date_range_query),
    service: StandardsService = Depends(get_standards_service),
):
    try:
        return service.mastery(course_id, standard_id, date_range)
    except Exception as e:
        raise to_http_exception(e)
