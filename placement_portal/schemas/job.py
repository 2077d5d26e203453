from datetime import datetime

from pydantic import BaseModel, field_validator

from placement_portal.models.enums import JobStatus
from placement_portal.schemas.common import CollegeSummary, PartySummary


def _required_text(v: str, label: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError(f"{label} is required")
    return v


class CollegeJobCreate(BaseModel):
    """A college posting for itself: the target college is the poster's own."""

    title: str
    description: str
    location: str | None = None
    salary: str | None = None
    deadline: datetime | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        return _required_text(v, "Title")

    @field_validator("description")
    @classmethod
    def description_required(cls, v: str) -> str:
        return _required_text(v, "Description")


class JobCreate(CollegeJobCreate):
    college: str

    @field_validator("college")
    @classmethod
    def college_required(cls, v: str) -> str:
        return _required_text(v, "College ID")


class JobUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    location: str | None = None
    salary: str | None = None
    deadline: datetime | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return None if v is None else _required_text(v, "Title")

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str | None) -> str | None:
        return None if v is None else _required_text(v, "Description")


class JobStatusUpdate(BaseModel):
    status: str  # "Approved" | "Rejected"


class JobResponse(BaseModel):
    id: str
    title: str
    description: str
    company: str
    location: str | None = None
    salary: str | None = None
    deadline: datetime | None = None
    status: JobStatus
    created_at: datetime | None = None
    recruiter: PartySummary | None = None
    college: CollegeSummary | None = None
