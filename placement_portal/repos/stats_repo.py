"""Aggregate counts for the college dashboard."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from placement_portal.models.application import Application
from placement_portal.models.enums import ApplicationStatus, JobStatus, Role
from placement_portal.models.job import Job
from placement_portal.models.user import User


def get_college_stats(db: Session, college_id: str) -> dict:
    total_students = (
        db.query(func.count(User.id))
        .filter(User.college_id == college_id, User.role == Role.STUDENT)
        .scalar()
        or 0
    )
    placed_students = (
        db.query(func.count(func.distinct(Application.student_id)))
        .join(Job, Application.job_id == Job.id)
        .filter(Job.college_id == college_id, Application.status == ApplicationStatus.OFFERED)
        .scalar()
        or 0
    )
    pending_approvals = (
        db.query(func.count(Job.id))
        .filter(Job.college_id == college_id, Job.status == JobStatus.PENDING)
        .scalar()
        or 0
    )
    active_jobs = (
        db.query(func.count(Job.id))
        .filter(Job.college_id == college_id, Job.status == JobStatus.APPROVED)
        .scalar()
        or 0
    )
    return {
        "total_students": total_students,
        "placed_students": placed_students,
        "pending_approvals": pending_approvals,
        "active_jobs": active_jobs,
    }
