import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from placement_portal.core.errors import DuplicateApplication
from placement_portal.core.security import generate_id
from placement_portal.models.application import Application
from placement_portal.models.enums import ApplicationStatus
from placement_portal.models.job import Job
from placement_portal.models.user import User

logger = logging.getLogger(__name__)


def create(db: Session, student_id: str, job_id: str) -> Application:
    """
    Insert an Applied application. The (student_id, job_id) unique constraint
    rejects a second row atomically, including under concurrent requests.
    """
    application = Application(
        id=generate_id(),
        student_id=student_id,
        job_id=job_id,
        status=ApplicationStatus.APPLIED,
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Duplicate application rejected: student=%s job=%s", student_id, job_id)
        raise DuplicateApplication() from e
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> Application | None:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.id == application_id)
        .first()
    )


def get_existing(db: Session, student_id: str, job_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.student_id == student_id, Application.job_id == job_id)
        .first()
    )


def get_for_student(db: Session, student_id: str) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.student_id == student_id)
        .order_by(Application.created_at.desc())
        .all()
    )


def get_for_job(db: Session, job_id: str) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.student))
        .filter(Application.job_id == job_id)
        .order_by(Application.created_at.desc())
        .all()
    )


def get_candidates_for_recruiter(db: Session, recruiter_id: str) -> list[User]:
    """Students who applied to any of the recruiter's jobs, each listed once."""
    applications = (
        db.query(Application)
        .join(Job, Application.job_id == Job.id)
        .options(joinedload(Application.student))
        .filter(Job.recruiter_id == recruiter_id)
        .order_by(Application.created_at.desc())
        .all()
    )
    students: dict[str, User] = {}
    for app in applications:
        if app.student is not None and app.student.id not in students:
            students[app.student.id] = app.student
    return list(students.values())


def save_status(db: Session, application: Application) -> Application:
    db.commit()
    db.refresh(application)
    return application


def delete(db: Session, application: Application) -> None:
    db.delete(application)
    db.commit()
