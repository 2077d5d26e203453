from placement_portal.models.enums import Role, JobStatus, ApplicationStatus
from placement_portal.models.college import College
from placement_portal.models.user import User, saved_jobs
from placement_portal.models.job import Job
from placement_portal.models.application import Application
from placement_portal.models.project import Project

__all__ = [
    "Role",
    "JobStatus",
    "ApplicationStatus",
    "College",
    "User",
    "saved_jobs",
    "Job",
    "Application",
    "Project",
]
