"""Test configuration and fixtures."""

import pytest
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from classdesk.database import Base, get_db
from classdesk.auth import create_access_token
from classdesk.toolkit.standards_catalog import LEARNING_STANDARDS


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

TEACHER_ID = "teacher-0001"


def standard_id_for(code):
    """Catalog id of the standard with the given code."""
    return next(standard.id for standard in LEARNING_STANDARDS if standard.code == code)


@pytest.fixture(scope="session")
def engine():
    """Create test database engine."""
    from classdesk import models  # noqa: F401

    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture(scope="function")
def db_session(engine):
    """Create test database session inside a transaction that is rolled back afterwards."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False)

    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture
def sample_course(db_session):
    """Create a sample course for testing."""
    from classdesk.models import Course
    course = Course(
        title="Life Science",
        subject="Science",
        grade_level="7",
        teacher_id=TEACHER_ID,
    )
    db_session.add(course)
    db_session.commit()
    db_session.refresh(course)
    return course


@pytest.fixture
def sample_module(db_session, sample_course):
    """Create a sample module with one lesson."""
    from classdesk.models import CourseModule, Lesson, LessonType
    module = CourseModule(course_id=sample_course.id, title="Cells", order_index=0)
    module.lessons.append(
        Lesson(
            title="Cell Structure",
            content="Organelles and what they do.",
            duration_minutes=20,
            lesson_type=LessonType.reading,
            xp_reward=10,
            order_index=0,
        )
    )
    db_session.add(module)
    db_session.commit()
    db_session.refresh(module)
    return module


@pytest.fixture
def sample_assignment(db_session, sample_course):
    """Create a sample assignment tagged with one standard."""
    from classdesk.models import Assignment
    assignment = Assignment(
        course_id=sample_course.id,
        title="Cell Diagram",
        instructions="Label the parts of an animal cell.",
        due_date=datetime(2024, 5, 10, 15, 0, tzinfo=timezone.utc),
        points=100,
        xp_reward=50,
        standard_ids=[standard_id_for("NGSS.MS-LS1-2")],
        created_by=TEACHER_ID,
    )
    db_session.add(assignment)
    db_session.commit()
    db_session.refresh(assignment)
    return assignment


@pytest.fixture
def sample_submissions(db_session, sample_assignment):
    """Three turned-in submissions, two of them graded."""
    from classdesk.models import Submission
    rows = [
        ("student-a", "Ana Lopez", 90.0, "Great labels"),
        ("student-b", "Ben Ito", 72.0, "Missing the Golgi body"),
        ("student-c", "Cara Diaz", None, None),
    ]
    submissions = []
    for student_id, name, grade, feedback in rows:
        submission = Submission(
            assignment_id=sample_assignment.id,
            student_id=student_id,
            student_name=name,
            submitted=True,
            submitted_at=datetime(2024, 5, 9, 12, 0, tzinfo=timezone.utc),
            grade=grade,
            feedback=feedback,
        )
        db_session.add(submission)
        submissions.append(submission)
    db_session.commit()
    for submission in submissions:
        db_session.refresh(submission)
    return submissions


@pytest.fixture
def teacher_headers():
    """Bearer headers for a teacher."""
    token = create_access_token(TEACHER_ID, "teacher", email="teacher@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def student_headers():
    """Bearer headers for a student, who may not use the teacher API."""
    token = create_access_token("student-a", "student")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def export_dir(tmp_path, monkeypatch):
    """Send grade exports to a temporary directory."""
    directory = tmp_path / "exports"
    monkeypatch.setenv("EXPORT_DIR", str(directory))
    return directory


@pytest.fixture
def client(db_session):
    """Test client whose requests share the test transaction."""
    from classdesk.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
