"""Routes for the edit-assignment and grading screens."""
from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session

from ..auth import TokenData, get_current_teacher
from ..database import get_db
from ..errors import to_http_exception
from .schemas import (
    AssignmentCreate, AssignmentUpdate, AssignmentDuplicate, AssignmentResponse,
    StandardsTag, SubmissionCreate, SubmissionResponse, GradeUpdate,
)
from .service import AssignmentService

router = APIRouter(prefix="/api", tags=["Assignments"], dependencies=[Depends(get_current_teacher)])


def get_assignment_service(db: Session = Depends(get_db)) -> AssignmentService:
    """Dependency to get an instance of AssignmentService."""
    return AssignmentService(db)


@router.post("/assignments", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    data: AssignmentCreate,
    teacher: TokenData = Depends(get_current_teacher),
    service: AssignmentService = Depends(get_assignment_service),
):
    try:
        return service.create_assignment(data, created_by=teacher.user_id)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/courses/{course_id}/assignments", response_model=list[AssignmentResponse])
async def list_assignments(course_id: str, service: AssignmentService = Depends(get_assignment_service)):
    try:
        return service.list_assignments(course_id)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/assignments/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(assignment_id: str, service: AssignmentService = Depends(get_assignment_service)):
    try:
        return service.get_assignment(assignment_id)
    except Exception as e:
        raise to_http_exception(e)


@router.patch("/assignments/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: str,
    data: AssignmentUpdate,
    service: AssignmentService = Depends(get_assignment_service),
):
    try:
        return service.update_assignment(assignment_id, data)
    except Exception as e:
        raise to_http_exception(e)


@router.delete("/assignments/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(assignment_id: str, service: AssignmentService = Depends(get_assignment_service)):
    try:
        service.delete_assignment(assignment_id)
    except Exception as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/assignments/{assignment_id}/duplicate", response_model=AssignmentResponse,
             status_code=status.HTTP_201_CREATED)
async def duplicate_assignment(
    assignment_id: str,
    data: AssignmentDuplicate,
    service: AssignmentService = Depends(get_assignment_service),
):
    try:
        return service.duplicate_assignment(assignment_id, course_id=data.course_id)
    except Exception as e:
        raise to_http_exception(e)


@router.put("/assignments/{assignment_id}/standards", response_model=AssignmentResponse)
async def tag_standards(
    assignment_id: str,
    data: StandardsTag,
    service: AssignmentService = Depends(get_assignment_service),
):
    try:
        return service.tag_standards(assignment_id, data.standard_ids)
    except Exception as e:
        raise to_http_exception(e)


@router.post("/assignments/{assignment_id}/submissions", response_model=SubmissionResponse,
             status_code=status.HTTP_201_CREATED)
async def record_submission(
    assignment_id: str,
    data: SubmissionCreate,
    service: AssignmentService = Depends(get_assignment_service),
):
    try:
        return service.record_submission(assignment_id, data.student_id, data.student_name, data.submitted)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/assignments/{assignment_id}/submissions", response_model=list[SubmissionResponse])
async def list_submissions(assignment_id: str, service: AssignmentService = Depends(get_assignment_service)):
    try:
        return service.list_submissions(assignment_id)
    except Exception as e:
        raise to_http_exception(e)


@router.put("/submissions/{submission_id}/grade", response_model=SubmissionResponse)
async def grade_submission(
    submission_id: str,
    data: GradeUpdate,
    service: AssignmentService = Depends(get_assignment_service),
):
    try:
        return service.grade_submission(submission_id, data.grade, data.feedback)
    except Exception as e:
        raise to_http_exception(e)
