from pydantic import BaseModel, field_validator

from placement_portal.models.enums import Role
from placement_portal.schemas.common import CollegeSummary, none_as_empty, split_tags


class StudentProfile(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    college: CollegeSummary | None = None
    branch: str | None = None
    cgpa: float | None = None
    skills: list[str] = []
    resume: str | None = None
    projects: list[str] = []
    saved_jobs: list[str] = []


class StudentProfileUpdate(BaseModel):
    name: str | None = None
    branch: str | None = None
    cgpa: float | None = None
    skills: list[str] | str | None = None
    resume: str | None = None

    @field_validator("cgpa")
    @classmethod
    def cgpa_range(cls, v: float | None) -> float | None:
        if v is not None and not 0 <= v <= 10:
            raise ValueError("CGPA must be between 0 and 10")
        return v

    @field_validator("skills")
    @classmethod
    def normalize_skills(cls, v):
        if v is None:
            return None
        return split_tags(v)


class StudentSummary(BaseModel):
    id: str
    name: str
    email: str
    branch: str | None = None
    cgpa: float | None = None
    skills: list[str] = []

    class Config:
        from_attributes = True

    coerce_skills = field_validator("skills", mode="before")(none_as_empty)
