import logging
from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from placement_portal.core.authorization import job_visibility_clause
from placement_portal.core.security import generate_id
from placement_portal.models.enums import JobStatus
from placement_portal.models.job import Job
from placement_portal.models.user import User

logger = logging.getLogger(__name__)

# Fields a recruiter may change after posting. Status, owner and target college are fixed.
EDITABLE_FIELDS = ("title", "description", "location", "salary", "deadline")


def create(
    db: Session,
    *,
    title: str,
    description: str,
    company: str,
    recruiter_id: str,
    college_id: str,
    status: JobStatus,
    location: str | None = None,
    salary: str | None = None,
    deadline: datetime | None = None,
) -> Job:
    job = Job(
        id=generate_id(),
        title=title,
        description=description,
        company=company,
        recruiter_id=recruiter_id,
        college_id=college_id,
        status=status,
        location=location,
        salary=salary,
        deadline=deadline,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("Job %s created by %s for college %s with status %s", job.id, recruiter_id, college_id, status.value)
    return job


def get_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id).first()


def list_visible(
    db: Session,
    user: User,
    status: JobStatus | None = None,
) -> list[Job]:
    """Jobs the caller may see, newest first, optionally narrowed by status."""
    q = (
        db.query(Job)
        .options(joinedload(Job.recruiter), joinedload(Job.college))
        .filter(job_visibility_clause(user))
    )
    if status is not None:
        q = q.filter(Job.status == status)
    return q.order_by(Job.created_at.desc()).all()


def update_content(db: Session, job: Job, **fields) -> Job:
    for name in EDITABLE_FIELDS:
        if name in fields and fields[name] is not None:
            setattr(job, name, fields[name])
    db.commit()
    db.refresh(job)
    return job


def save_status(db: Session, job: Job) -> Job:
    db.commit()
    db.refresh(job)
    return job
