from datetime import datetime

from pydantic import BaseModel, field_validator

from placement_portal.models.enums import ApplicationStatus
from placement_portal.schemas.common import none_as_empty


class ApplicationJob(BaseModel):
    id: str
    title: str
    company: str

    class Config:
        from_attributes = True


class ApplicantSummary(BaseModel):
    id: str
    name: str
    email: str
    branch: str | None = None
    cgpa: float | None = None
    skills: list[str] = []
    resume: str | None = None

    class Config:
        from_attributes = True

    coerce_skills = field_validator("skills", mode="before")(none_as_empty)


class ApplicationResponse(BaseModel):
    id: str
    status: ApplicationStatus
    created_at: datetime | None = None
    job_id: str
    student_id: str
    job: ApplicationJob | None = None
    student: ApplicantSummary | None = None


class ApplicationStatusUpdate(BaseModel):
    status: str


class Notification(BaseModel):
    id: str
    title: str
    message: str
    type: str
    date: str | None = None
