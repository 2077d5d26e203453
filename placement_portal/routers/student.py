import logging

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from placement_portal.core.authorization import (
    can_view_job,
    ensure_application_owner,
    ensure_project_owner,
)
from placement_portal.core.errors import NotFound, PortalError, UpstreamFailure
from placement_portal.database import get_db
from placement_portal.dependencies import get_current_student
from placement_portal.models.user import User
from placement_portal.repos.application_repo import (
    create as create_application,
    delete as delete_application,
    get_by_id as get_application,
    get_for_student as get_student_applications,
)
from placement_portal.repos.job_repo import get_by_id as get_job, list_visible as list_visible_jobs
from placement_portal.repos.project_repo import (
    create as create_project,
    delete as delete_project,
    get_by_id as get_project,
    get_for_owner as get_projects,
    update as update_project,
)
from placement_portal.repos.user_repo import save_job, unsave_job, update_student_profile
from placement_portal.schemas.application import ApplicationResponse, Notification
from placement_portal.schemas.common import MessageResponse
from placement_portal.schemas.job import JobResponse
from placement_portal.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from placement_portal.schemas.student import StudentProfile, StudentProfileUpdate
from placement_portal.serializers import application_to_response, job_to_response, student_to_profile
from placement_portal.services.lifecycle import ensure_withdrawable
from placement_portal.services.notifications import build_notifications
from placement_portal.services.resume_storage import store_resume

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/student", tags=["student"])


def _visible_job_or_404(db: Session, user: User, job_id: str):
    # Jobs outside the student's view are reported as missing, not forbidden.
    job = get_job(db, job_id)
    if not job or not can_view_job(user, job):
        raise NotFound("Job not found")
    return job


# --- Profile ---


@router.get("/me", response_model=StudentProfile)
def get_profile(user: User = Depends(get_current_student)):
    return student_to_profile(user)


@router.put("/me", response_model=StudentProfile)
def update_profile(
    body: StudentProfileUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    try:
        user = update_student_profile(
            db,
            user,
            name=body.name.strip() if body.name and body.name.strip() else None,
            branch=body.branch,
            cgpa=body.cgpa,
            skills=body.skills,
            resume=body.resume,
        )
        return student_to_profile(user)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Profile update failed for user=%s: %s", user.id, e)
        raise UpstreamFailure("Failed to update profile") from e


@router.post("/resume", response_model=StudentProfile)
async def upload_resume(
    resume: UploadFile = File(..., description="Resume PDF file"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    """Store the PDF, then point the profile at it. A failed upload leaves the profile untouched."""
    content = await resume.read()
    reference = store_resume(user.id, resume.filename, content)
    try:
        user = update_student_profile(db, user, resume=reference)
    except Exception as e:
        logger.exception("Saving resume reference failed for user=%s: %s", user.id, e)
        raise UpstreamFailure("Failed to update profile") from e
    return student_to_profile(user)


# --- Jobs ---


@router.get("/jobs", response_model=list[JobResponse])
def list_jobs(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    """Approved jobs that target the student's own college, newest first."""
    if not user.college_id:
        raise NotFound("Student college not found")
    jobs = list_visible_jobs(db, user)
    logger.debug("GET /student/jobs user=%s count=%d", user.id, len(jobs))
    return [job_to_response(j) for j in jobs]


@router.post("/jobs/{job_id}/apply", response_model=ApplicationResponse)
def apply_to_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    try:
        _visible_job_or_404(db, user, job_id)
        application = create_application(db, user.id, job_id)
        logger.info("Application created: student=%s job=%s application=%s", user.id, job_id, application.id)
        return application_to_response(application)
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Apply failed for user=%s job=%s: %s", user.id, job_id, e)
        raise UpstreamFailure("Failed to apply") from e


@router.put("/jobs/{job_id}/save", response_model=MessageResponse)
def save_job_for_later(
    job_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    job = _visible_job_or_404(db, user, job_id)
    save_job(db, user, job)
    return MessageResponse(message="Job saved")


@router.delete("/jobs/{job_id}/save", response_model=MessageResponse)
def unsave_job_for_later(
    job_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    if not unsave_job(db, user, job_id):
        raise NotFound("Saved job not found")
    return MessageResponse(message="Job removed from saved")


@router.get("/saved-jobs", response_model=list[JobResponse])
def list_saved_jobs(user: User = Depends(get_current_student)):
    """Saved jobs the student can still see; withdrawn or rejected postings drop out."""
    return [job_to_response(j) for j in user.saved_jobs if can_view_job(user, j)]


# --- Applications ---


@router.get("/applications", response_model=list[ApplicationResponse])
def list_applications(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    return [application_to_response(a) for a in get_student_applications(db, user.id)]


@router.delete("/applications/{application_id}", response_model=MessageResponse)
def withdraw_application(
    application_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    try:
        application = get_application(db, application_id)
        if not application:
            raise NotFound("Application not found")
        ensure_application_owner(user, application)
        ensure_withdrawable(application)
        delete_application(db, application)
        logger.info("Application withdrawn: student=%s application=%s", user.id, application_id)
        return MessageResponse(message="Application withdrawn")
    except PortalError:
        raise
    except Exception as e:
        logger.exception("Withdraw failed for user=%s application=%s: %s", user.id, application_id, e)
        raise UpstreamFailure("Failed to withdraw application") from e


@router.get("/notifications", response_model=list[Notification])
def list_notifications(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    """Status updates on the student's applications, recomputed on every call."""
    return build_notifications(get_student_applications(db, user.id))


# --- Projects ---


@router.get("/projects", response_model=list[ProjectResponse])
def list_projects(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    return [ProjectResponse.model_validate(p) for p in get_projects(db, user.id)]


@router.post("/projects", response_model=ProjectResponse)
def add_project(
    body: ProjectCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    try:
        project = create_project(db, user.id, body.name, body.description, tech=body.tech, link=body.link)
        return ProjectResponse.model_validate(project)
    except Exception as e:
        logger.exception("Project create failed for user=%s: %s", user.id, e)
        raise UpstreamFailure("Failed to add project") from e


def _owned_project(db: Session, user: User, project_id: str):
    project = get_project(db, project_id)
    if not project:
        raise NotFound("Project not found")
    ensure_project_owner(user, project)
    return project


@router.put("/projects/{project_id}", response_model=ProjectResponse)
def edit_project(
    project_id: str,
    body: ProjectUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    project = _owned_project(db, user, project_id)
    project = update_project(
        db,
        project,
        name=body.name,
        description=body.description,
        tech=body.tech,
        link=body.link,
    )
    return ProjectResponse.model_validate(project)


@router.delete("/projects/{project_id}", response_model=MessageResponse)
def remove_project(
    project_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_student),
):
    project = _owned_project(db, user, project_id)
    delete_project(db, project)
    return MessageResponse(message="Project removed")
