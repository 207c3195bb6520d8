"""Routes for the take-attendance screen."""
from typing import Optional

from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session

from ..auth import TokenData, get_current_teacher
from ..database import get_db
from ..dependencies import date_range_query
from ..errors import to_http_exception
from ..toolkit.items import DateRange
from .schemas import TakeAttendanceRequest, AttendanceRecordResponse, AttendanceSummary
from .service import AttendanceService

router = APIRouter(prefix="/api", tags=["Attendance"], dependencies=[Depends(get_current_teacher)])


def get_attendance_service(db: Session = Depends(get_db)) -> AttendanceService:
    """Dependency to get an instance of AttendanceService."""
    return AttendanceService(db)


@router.post("/attendance", response_model=list[AttendanceRecordResponse], status_code=status.HTTP_201_CREATED)
async def take_attendance(
    data: TakeAttendanceRequest,
    teacher: TokenData = Depends(get_current_teacher),
    service: AttendanceService = Depends(get_attendance_service),
):
    try:
        return service.take_attendance(
            data.course_id, data.date, data.entries, marked_by=teacher.user_id, notes=data.notes
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/courses/{course_id}/attendance", response_model=list[AttendanceRecordResponse])
async def list_attendance(
    course_id: str,
    date_range: Optional[DateRange] = Depends(date_range_query),
    service: AttendanceService = Depends(get_attendance_service),
):
    try:
        return service.list_attendance(course_id, date_range)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/courses/{course_id}/attendance/summary", response_model=AttendanceSummary)
async def attendance_summary(
    course_id: str,
    date_range: Optional[DateRange] = Depends(date_range_query),
    service: AttendanceService = Depends(get_attendance_service),
):
    try:
        return service.summary(course_id, date_range)
    except Exception as e:
        raise to_http_exception(e)


@router.delete("/attendance/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attendance_record(record_id: str, service: AttendanceService = Depends(get_attendance_service)):
    try:
        service.delete_record(record_id)
    except Exception as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
