import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from placement_portal.config import settings
from placement_portal.core.authorization import ensure_college_scope
from placement_portal.core.errors import NotFound, PortalError, UpstreamFailure
from placement_portal.database import get_db
from placement_portal.dependencies import get_current_college
from placement_portal.models.enums import JobStatus, Role
from placement_portal.models.user import User
from placement_portal.repos.college_repo import get_all as get_all_colleges
from placement_portal.repos.job_repo import (
    create as create_job,
    get_by_id as get_job,
    list_visible as list_visible_jobs,
    save_status as save_job_status,
)
from placement_portal.repos.stats_repo import get_college_stats
from placement_portal.repos.user_repo import get_students_of_college, get_recruiters_for_college
from placement_portal.schemas.college import CollegeResponse, CollegeStats
from placement_portal.schemas.common import PartySummary
from placement_portal.schemas.job import CollegeJobCreate, JobResponse, JobStatusUpdate
from placement_portal.schemas.student import StudentSummary
from placement_portal.serializers import job_to_response
from placement_portal.services.lifecycle import initial_job_status, parse_job_decision, transition_job

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/college", tags=["college"])


def _own_college_id(user: User) -> str:
    if not user.college_id:
        raise NotFound("College not found for this user.")
    return user.college_id


# --- Public directory ---


@router.get("/all", response_model=list[CollegeResponse])
def list_colleges(db: Session = Depends(get_db)):
    """Every college, for registration and job-posting pickers."""
    try:
        return [CollegeResponse.model_validate(c) for c in get_all_colleges(db)]
    except Exception as e:
        logger.exception("Listing colleges failed: %s", e)
        raise UpstreamFailure("Failed to load colleges") from e


@router.get("/", response_model=list[CollegeResponse])
def list_colleges_sorted(db: Session = Depends(get_db)):
    return list_colleges(db)


# --- College officer ---


@router.get("/jobs/all", response_model=list[JobResponse])
def list_college_jobs(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    """All jobs targeting the officer's college, in every status."""
    _own_college_id(user)
    return [job_to_response(j) for j in list_visible_jobs(db, user)]


@router.get("/jobs/pending", response_model=list[JobResponse])
def list_pending_jobs(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    _own_college_id(user)
    return [job_to_response(j) for j in list_visible_jobs(db, user, status=JobStatus.PENDING)]


@router.post("/jobs", response_model=JobResponse)
def create_college_job(
    body: CollegeJobCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    """A college posting for itself. Published immediately, no review step."""
    try:
        college_id = _own_college_id(user)
        job = create_job(
            db,
            title=body.title,
            description=body.description,
            company=user.company or settings.college_posting_company,
            recruiter_id=user.id,
            college_id=college_id,
            status=initial_job_status(Role.COLLEGE),
            location=body.location,
            salary=body.salary,
            deadline=body.deadline,
        )
        return job_to_response(job)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("College job create failed for user=%s: %s", user.id, e)
        raise UpstreamFailure("Failed to create job") from e


@router.put("/jobs/{job_id}/status", response_model=JobResponse)
def set_job_status(
    job_id: str,
    body: JobStatusUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    """Approve or reject a pending job that targets this college."""
    target = parse_job_decision(body.status)
    try:
        job = get_job(db, job_id)
        if not job:
            raise NotFound("Job not found")
        ensure_college_scope(user, job)
        transition_job(job, target)
        job = save_job_status(db, job)
        logger.info("Job status updated: job=%s status=%s by college user=%s", job.id, target.value, user.id)
        return job_to_response(job)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Job status update failed for job=%s: %s", job_id, e)
        raise UpstreamFailure("Failed to update job status") from e


@router.get("/students", response_model=list[StudentSummary])
def list_students(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    college_id = _own_college_id(user)
    return [StudentSummary.model_validate(s) for s in get_students_of_college(db, college_id)]


@router.get("/recruiters", response_model=list[PartySummary])
def list_recruiters(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    """Recruiters who have posted at least one job to this college."""
    college_id = _own_college_id(user)
    return [PartySummary.model_validate(r) for r in get_recruiters_for_college(db, college_id)]


@router.get("/stats", response_model=CollegeStats)
def college_stats(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_college),
):
    college_id = _own_college_id(user)
    try:
        return CollegeStats(**get_college_stats(db, college_id))
    except Exception as e:
        logger.exception("College stats failed for college=%s: %s", college_id, e)
        raise UpstreamFailure("Failed to load college stats") from e
