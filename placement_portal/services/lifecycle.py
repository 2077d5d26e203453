"""
Status lifecycles for jobs and applications.
Every status change on a Job or Application goes through this module.
"""
import logging

from placement_portal.core.errors import Forbidden, InvalidTransition, ValidationError
from placement_portal.models.application import Application
from placement_portal.models.enums import ApplicationStatus, JobStatus, Role
from placement_portal.models.job import Job

logger = logging.getLogger(__name__)


JOB_TRANSITIONS: dict[JobStatus, set[JobStatus]] = {
    JobStatus.PENDING: {JobStatus.APPROVED, JobStatus.REJECTED},
    JobStatus.APPROVED: set(),  # Terminal
    JobStatus.REJECTED: set(),  # Terminal
}

# Values a college officer may submit when reviewing a posting
JOB_DECISIONS = {JobStatus.APPROVED, JobStatus.REJECTED}

APPLICATION_TRANSITIONS: dict[ApplicationStatus, set[ApplicationStatus]] = {
    ApplicationStatus.APPLIED: {
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.INTERVIEW_SCHEDULED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.OFFERED,
    },
    ApplicationStatus.SHORTLISTED: {
        ApplicationStatus.INTERVIEW_SCHEDULED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.OFFERED,
    },
    ApplicationStatus.INTERVIEW_SCHEDULED: {
        ApplicationStatus.REJECTED,
        ApplicationStatus.OFFERED,
    },
    ApplicationStatus.REJECTED: set(),  # Terminal
    ApplicationStatus.OFFERED: set(),  # Terminal
}

TERMINAL_APPLICATION_STATUSES = {s for s, targets in APPLICATION_TRANSITIONS.items() if not targets}


def initial_job_status(role: Role) -> JobStatus:
    """Colleges posting for themselves skip review; recruiter postings wait for it."""
    role = Role(role)
    if role is Role.COLLEGE:
        return JobStatus.APPROVED
    if role is Role.RECRUITER:
        return JobStatus.PENDING
    if role is Role.STUDENT:
        raise Forbidden("Students cannot post jobs")
    raise Forbidden(f"Unknown role {role!r}")


def parse_job_decision(value: str) -> JobStatus:
    try:
        status = JobStatus(value)
    except ValueError:
        status = None
    if status not in JOB_DECISIONS:
        raise ValidationError.for_field("status", "Invalid status: must be Approved or Rejected")
    return status


def parse_application_status(value: str) -> ApplicationStatus:
    try:
        return ApplicationStatus(value)
    except ValueError as e:
        allowed = ", ".join(s.value for s in ApplicationStatus)
        raise ValidationError.for_field("status", f"Invalid status: must be one of {allowed}") from e


def transition_job(job: Job, to_status: JobStatus) -> Job:
    """Apply a review decision in place. Caller commits."""
    from_status = JobStatus(job.status)
    if to_status not in JOB_TRANSITIONS[from_status]:
        raise InvalidTransition(f"Job is already {from_status.value}")
    job.status = to_status
    logger.info("Job %s: %s -> %s", job.id, from_status.value, to_status.value)
    return job


def transition_application(application: Application, to_status: ApplicationStatus) -> Application:
    """Advance an application in place. Caller commits."""
    from_status = ApplicationStatus(application.status)
    if to_status not in APPLICATION_TRANSITIONS[from_status]:
        raise InvalidTransition(f"Cannot move application from {from_status.value} to {to_status.value}")
    application.status = to_status
    logger.info("Application %s: %s -> %s", application.id, from_status.value, to_status.value)
    return application


def ensure_withdrawable(application: Application) -> None:
    status = ApplicationStatus(application.status)
    if status in TERMINAL_APPLICATION_STATUSES:
        raise InvalidTransition(f"Application already {status.value.lower()}; it can no longer be withdrawn")
