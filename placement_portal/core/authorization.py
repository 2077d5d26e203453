"""
Role gate, record ownership checks and college-scoped visibility.

These are pure functions over already-loaded records: they never touch the
session, so routers apply them after fetching and before mutating. Every
decision that depends on the caller's role branches explicitly on each Role
member and refuses anything else.
"""

import logging
from collections.abc import Iterable

from sqlalchemy import and_, false

from placement_portal.core.errors import Forbidden, OwnershipViolation
from placement_portal.models.application import Application
from placement_portal.models.enums import JobStatus, Role
from placement_portal.models.job import Job
from placement_portal.models.project import Project
from placement_portal.models.user import User

logger = logging.getLogger(__name__)


def authorize_role(user: User, allowed_roles: Iterable[Role]) -> User:
    allowed = set(allowed_roles)
    if user.role not in allowed:
        logger.info("Role gate refused user=%s role=%s allowed=%s", user.id, user.role, sorted(r.value for r in allowed))
        raise Forbidden(f"User role {Role(user.role).value} is not authorized to access this route")
    return user


def ensure_job_owner(user: User, job: Job) -> None:
    if job.recruiter_id != user.id:
        logger.info("Ownership refused: user=%s is not recruiter of job=%s", user.id, job.id)
        raise OwnershipViolation("You do not own this job")


def ensure_college_scope(user: User, job: Job) -> None:
    """College officers may only act on jobs that target their own college."""
    authorize_role(user, {Role.COLLEGE})
    if not user.college_id or job.college_id != user.college_id:
        logger.info("College scope refused: user=%s college=%s job=%s", user.id, user.college_id, job.id)
        raise OwnershipViolation("This job does not target your college")


def ensure_application_owner(user: User, application: Application) -> None:
    if application.student_id != user.id:
        logger.info("Ownership refused: user=%s does not own application=%s", user.id, application.id)
        raise OwnershipViolation("You do not own this application")


def ensure_application_job_owner(user: User, application: Application) -> None:
    job = application.job
    if job is None or job.recruiter_id != user.id:
        logger.info("Ownership refused: user=%s does not own job of application=%s", user.id, application.id)
        raise OwnershipViolation("This application is not for one of your jobs")


def ensure_project_owner(user: User, project: Project) -> None:
    if project.owner_id != user.id:
        raise OwnershipViolation("You do not own this project")


def job_visibility_clause(user: User):
    """SQL filter selecting the jobs ``user`` may list."""
    role = Role(user.role)
    if role is Role.STUDENT:
        if not user.college_id:
            return false()
        return and_(Job.status == JobStatus.APPROVED, Job.college_id == user.college_id)
    if role is Role.COLLEGE:
        if not user.college_id:
            return false()
        return Job.college_id == user.college_id
    if role is Role.RECRUITER:
        return Job.recruiter_id == user.id
    raise Forbidden(f"Unknown role {role!r}")


def can_view_job(user: User, job: Job) -> bool:
    role = Role(user.role)
    if role is Role.STUDENT:
        return bool(user.college_id) and job.status == JobStatus.APPROVED and job.college_id == user.college_id
    if role is Role.COLLEGE:
        return bool(user.college_id) and job.college_id == user.college_id
    if role is Role.RECRUITER:
        return job.recruiter_id == user.id
    raise Forbidden(f"Unknown role {role!r}")
