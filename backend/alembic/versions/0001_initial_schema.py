"""Initial schema

Revision ID: 0001
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

lesson_type = sa.Enum('reading', 'video', 'activity', 'quiz', name='lessontype')
attendance_status = sa.Enum('present', 'absent', 'tardy', 'excused', name='attendancestatus')
peer_review_status = sa.Enum('assigned', 'in_progress', 'completed', name='peerreviewstatus')


def upgrade() -> None:
    # Create courses table
    op.create_table('courses',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('subject', sa.String(length=100), nullable=True),
        sa.Column('grade_level', sa.String(length=50), nullable=True),
        sa.Column('teacher_id', sa.String(length=36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_courses_teacher_id', 'courses', ['teacher_id'])

    # Create course_modules table
    op.create_table('course_modules',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('course_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_course_modules_course_id', 'course_modules', ['course_id'])

    # Create lessons table
    op.create_table('lessons',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('module_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('lesson_type', lesson_type, nullable=False),
        sa.Column('xp_reward', sa.Integer(), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['module_id'], ['course_modules.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_lessons_module_id', 'lessons', ['module_id'])

    # Create assignments table
    op.create_table('assignments',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('course_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('xp_reward', sa.Integer(), nullable=True),
        sa.Column('standard_ids', sa.JSON(), nullable=True),
        sa.Column('created_by', sa.String(length=36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_assignments_course_id', 'assignments', ['course_id'])

    # Create submissions table
    op.create_table('submissions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('assignment_id', sa.String(length=36), nullable=False),
        sa.Column('student_id', sa.String(length=36), nullable=False),
        sa.Column('student_name', sa.String(length=255), nullable=True),
        sa.Column('submitted', sa.Boolean(), nullable=True),
        sa.Column('submitted_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('grade', sa.Float(), nullable=True),
        sa.Column('feedback', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['assignment_id'], ['assignments.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('assignment_id', 'student_id', name='uq_submission_assignment_student')
    )
    op.create_index('ix_submissions_assignment_id', 'submissions', ['assignment_id'])
    op.create_index('ix_submissions_student_id', 'submissions', ['student_id'])

    # Create attendance_records table
    op.create_table('attendance_records',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('course_id', sa.String(length=36), nullable=False),
        sa.Column('student_id', sa.String(length=36), nullable=False),
        sa.Column('attendance_date', sa.Date(), nullable=False),
        sa.Column('status', attendance_status, nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('marked_by', sa.String(length=36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('course_id', 'student_id', 'attendance_date', name='uq_attendance_course_student_date')
    )
    op.create_index('ix_attendance_records_course_id', 'attendance_records', ['course_id'])
    op.create_index('ix_attendance_records_student_id', 'attendance_records', ['student_id'])

    # Create peer_reviews table
    op.create_table('peer_reviews',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('assignment_id', sa.String(length=36), nullable=False),
        sa.Column('reviewer_id', sa.String(length=36), nullable=False),
        sa.Column('submission_owner_id', sa.String(length=36), nullable=False),
        sa.Column('status', peer_review_status, nullable=False),
        sa.Column('score', sa.Float(), nullable=True),
        sa.Column('feedback', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['assignment_id'], ['assignments.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('reviewer_id <> submission_owner_id', name='ck_peer_review_not_self')
    )
    op.create_index('ix_peer_reviews_assignment_id', 'peer_reviews', ['assignment_id'])
    op.create_index('ix_peer_reviews_reviewer_id', 'peer_reviews', ['reviewer_id'])


def downgrade() -> None:
    op.drop_index('ix_peer_reviews_reviewer_id', table_name='peer_reviews')
    op.drop_index('ix_peer_reviews_assignment_id', table_name='peer_reviews')
    op.drop_table('peer_reviews')
    op.drop_index('ix_attendance_records_student_id', table_name='attendance_records')
    op.drop_index('ix_attendance_records_course_id', table_name='attendance_records')
    op.drop_table('attendance_records')
    op.drop_index('ix_submissions_student_id', table_name='submissions')
    op.drop_index('ix_submissions_assignment_id', table_name='submissions')
    op.drop_table('submissions')
    op.drop_index('ix_assignments_course_id', table_name='assignments')
    op.drop_table('assignments')
    op.drop_index('ix_lessons_module_id', table_name='lessons')
    op.drop_table('lessons')
    op.drop_index('ix_course_modules_course_id', table_name='course_modules')
    op.drop_table('course_modules')
    op.drop_index('ix_courses_teacher_id', table_name='courses')
    op.drop_table('courses')

    # Drop enum types (no-op on backends without named enums)
    bind = op.get_bind()
    peer_review_status.drop(bind, checkfirst=True)
    attendance_status.drop(bind, checkfirst=True)
    lesson_type.drop(bind, checkfirst=True)
