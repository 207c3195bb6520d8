"""Routes for the create-lesson and manage-modules screens."""
from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session

from ..auth import TokenData, get_current_teacher
from ..database import get_db
from ..errors import to_http_exception
from .schemas import (
    CourseCreate, CourseResponse, ModuleCreate, ModuleUpdate, ModuleReorder,
    ModuleResponse, LessonCreate, LessonUpdate, LessonResponse,
)
from .service import CourseService

router = APIRouter(prefix="/api", tags=["Courses"], dependencies=[Depends(get_current_teacher)])


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    """Dependency to get an instance of CourseService."""
    return CourseService(db)


@router.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    data: CourseCreate,
    teacher: TokenData = Depends(get_current_teacher),
    service: CourseService = Depends(get_course_service),
):
    try:
        return service.create_course(data, teacher_id=teacher.user_id)
    except HTTPException as e:
        raise e
    except Exception as e:
        raise to_http_exception(e)


@router.get("/courses", response_model=list[CourseResponse])
async def list_my_courses(
    teacher: TokenData = Depends(get_current_teacher),
    service: CourseService = Depends(get_course_service),
):
    """Courses taught by the caller."""
    return service.list_courses(teacher_id=teacher.user_id)


@router.get("/courses/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, service: CourseService = Depends(get_course_service)):
    try:
        return service.get_course(course_id)
    except Exception as e:
        raise to_http_exception(e)


@router.post("/courses/{course_id}/modules", response_model=ModuleResponse, status_code=status.HTTP_201_CREATED)
async def create_module(
    course_id: str,
    data: ModuleCreate,
    service: CourseService = Depends(get_course_service),
):
    try:
        return service.create_module(course_id, data.title)
    except Exception as e:
        raise to_http_exception(e)


@router.put("/courses/{course_id}/modules/order", response_model=CourseResponse)
async def reorder_modules(
    course_id: str,
    data: ModuleReorder,
    service: CourseService = Depends(get_course_service),
):
    try:
        return service.reorder_modules(course_id, data.module_ids)
    except Exception as e:
        raise to_http_exception(e)


@router.patch("/modules/{module_id}", response_model=ModuleResponse)
async def rename_module(
    module_id: str,
    data: ModuleUpdate,
    service: CourseService = Depends(get_course_service),
):
    try:
        return service.rename_module(module_id, data.title)
    except Exception as e:
        raise to_http_exception(e)


@router.delete("/modules/{module_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_module(module_id: str, service: CourseService = Depends(get_course_service)):
    try:
        service.delete_module(module_id)
    except Exception as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/modules/{module_id}/lessons", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
async def create_lesson(
    module_id: str,
    data: LessonCreate,
    service: CourseService = Depends(get_course_service),
):
    try:
        return service.create_lesson(module_id, data)
    except Exception as e:
        raise to_http_exception(e)


@router.patch("/lessons/{lesson_id}", response_model=LessonResponse)
async def update_lesson(
    lesson_id: str,
    data: LessonUpdate,
    service: CourseService = Depends(get_course_service),
):
    try:
        return service.update_lesson(lesson_id, data)
    except Exception as e:
        raise to_http_exception(e)


@router.delete("/lessons/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lesson(lesson_id: str, service: CourseService = Depends(get_course_service)):
    try:
        service.delete_lesson(lesson_id)
    except Exception as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
