"""ORM record to response-model conversion shared by the role routers."""

from placement_portal.models.application import Application
from placement_portal.models.job import Job
from placement_portal.models.user import User
from placement_portal.schemas.application import ApplicantSummary, ApplicationJob, ApplicationResponse
from placement_portal.schemas.common import CollegeSummary, PartySummary
from placement_portal.schemas.job import JobResponse
from placement_portal.schemas.student import StudentProfile


def job_to_response(job: Job) -> JobResponse:
    recruiter = job.recruiter
    college = job.college
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        company=job.company,
        location=job.location,
        salary=job.salary,
        deadline=job.deadline,
        status=job.status,
        created_at=job.created_at,
        recruiter=PartySummary.model_validate(recruiter) if recruiter is not None else None,
        college=CollegeSummary.model_validate(college) if college is not None else None,
    )


def application_to_response(
    application: Application,
    *,
    include_job: bool = True,
    include_student: bool = False,
) -> ApplicationResponse:
    job = application.job if include_job else None
    student = application.student if include_student else None
    return ApplicationResponse(
        id=application.id,
        status=application.status,
        created_at=application.created_at,
        job_id=application.job_id,
        student_id=application.student_id,
        job=ApplicationJob.model_validate(job) if job is not None else None,
        student=ApplicantSummary.model_validate(student) if student is not None else None,
    )


def student_to_profile(user: User) -> StudentProfile:
    return StudentProfile(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        college=CollegeSummary.model_validate(user.college) if user.college is not None else None,
        branch=user.branch,
        cgpa=user.cgpa,
        skills=list(user.skills or []),
        resume=user.resume,
        projects=[p.id for p in user.projects],
        saved_jobs=[j.id for j in user.saved_jobs],
    )
