import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from placement_portal.core.authorization import ensure_application_job_owner, ensure_job_owner
from placement_portal.core.errors import NotFound, PortalError, UpstreamFailure
from placement_portal.database import get_db
from placement_portal.dependencies import get_current_recruiter
from placement_portal.models.enums import Role
from placement_portal.models.user import User
from placement_portal.repos.application_repo import (
    get_by_id as get_application,
    get_candidates_for_recruiter,
    get_for_job as get_job_applications,
    save_status as save_application_status,
)
from placement_portal.repos.college_repo import get_by_id as get_college
from placement_portal.repos.job_repo import (
    create as create_job,
    get_by_id as get_job,
    list_visible as list_visible_jobs,
    update_content as update_job_content,
)
from placement_portal.schemas.application import ApplicationResponse, ApplicationStatusUpdate
from placement_portal.schemas.job import JobCreate, JobResponse, JobUpdate
from placement_portal.schemas.student import StudentSummary
from placement_portal.serializers import application_to_response, job_to_response
from placement_portal.services.lifecycle import (
    initial_job_status,
    parse_application_status,
    transition_application,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/recruiter", tags=["recruiter"])


def _owned_job(db: Session, user: User, job_id: str):
    job = get_job(db, job_id)
    if not job:
        raise NotFound("Job not found")
    ensure_job_owner(user, job)
    return job


@router.get("/jobs", response_model=list[JobResponse])
def list_my_jobs(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_recruiter),
):
    return [job_to_response(j) for j in list_visible_jobs(db, user)]


@router.post("/jobs", response_model=JobResponse)
def post_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_recruiter),
):
    """Post a job to a college. It stays Pending until that college reviews it."""
    try:
        if not get_college(db, body.college):
            raise NotFound("College not found")
        job = create_job(
            db,
            title=body.title,
            description=body.description,
            company=user.company or user.name,
            recruiter_id=user.id,
            college_id=body.college,
            status=initial_job_status(Role.RECRUITER),
            location=body.location,
            salary=body.salary,
            deadline=body.deadline,
        )
        return job_to_response(job)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Job create failed for recruiter=%s: %s", user.id, e)
        raise UpstreamFailure("Failed to create job") from e


@router.put("/jobs/{job_id}", response_model=JobResponse)
def edit_job(
    job_id: str,
    body: JobUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_recruiter),
):
    """Edit posting content. Allowed in every status; never changes the status."""
    try:
        job = _owned_job(db, user, job_id)
        job = update_job_content(db, job, **body.model_dump(exclude_unset=True))
        logger.info("Job edited: job=%s recruiter=%s", job.id, user.id)
        return job_to_response(job)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Job edit failed for job=%s: %s", job_id, e)
        raise UpstreamFailure("Failed to update job") from e


@router.get("/jobs/{job_id}/applications", response_model=list[ApplicationResponse])
def list_job_applications(
    job_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_recruiter),
):
    _owned_job(db, user, job_id)
    return [
        application_to_response(a, include_job=False, include_student=True)
        for a in get_job_applications(db, job_id)
    ]


@router.put("/applications/{application_id}/status", response_model=ApplicationResponse)
def advance_application(
    application_id: str,
    body: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_recruiter),
):
    """Move an applicant forward (or reject them) on one of the recruiter's own jobs."""
    target = parse_application_status(body.status)
    try:
        application = get_application(db, application_id)
        if not application:
            raise NotFound("Application not found")
        ensure_application_job_owner(user, application)
        transition_application(application, target)
        application = save_application_status(db, application)
        return application_to_response(application, include_student=True)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Application status update failed for application=%s: %s", application_id, e)
        raise UpstreamFailure("Failed to update application") from e


@router.get("/candidates", response_model=list[StudentSummary])
def list_candidates(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_recruiter),
):
    """Every student who applied to any of this recruiter's jobs, once each."""
    return [StudentSummary.model_validate(s) for s in get_candidates_for_recruiter(db, user.id)]
