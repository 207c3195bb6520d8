"""Routes for the grade export screen."""
import os
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from ..auth import get_current_teacher
from ..database import get_db
from ..dependencies import date_range_query
from ..errors import to_http_exception
from ..toolkit.items import DateRange
from .schemas import GradePreview
from .service import GradeExportService

router = APIRouter(prefix="/api", tags=["Grades"], dependencies=[Depends(get_current_teacher)])


def get_grade_export_service(db: Session = Depends(get_db)) -> GradeExportService:
    """Dependency to get an instance of GradeExportService."""
    return GradeExportService(db)


@router.get("/courses/{course_id}/grades", response_model=GradePreview)
async def preview_grades(
    course_id: str,
    date_range: Optional[DateRange] = Depends(date_range_query),
    service: GradeExportService = Depends(get_grade_export_service),
):
    try:
        return service.preview(course_id, date_range)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/courses/{course_id}/grades/export")
async def export_grades(
    course_id: str,
    background_tasks: BackgroundTasks,
    date_range: Optional[DateRange] = Depends(date_range_query),
    service: GradeExportService = Depends(get_grade_export_service),
):
    """Download the course's grades as CSV; the written file is removed once it has been sent."""
    try:
        file_path = service.export_csv(course_id, date_range)
    except Exception as e:
        raise to_http_exception(e)
    background_tasks.add_task(os.remove, str(file_path))
    return FileResponse(path=str(file_path), filename=file_path.name, media_type="text/csv")
