import enum

from sqlalchemy import Enum


class Role(str, enum.Enum):
    STUDENT = "Student"
    COLLEGE = "College"
    RECRUITER = "Recruiter"


class JobStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ApplicationStatus(str, enum.Enum):
    APPLIED = "Applied"
    SHORTLISTED = "Shortlisted"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    REJECTED = "Rejected"
    OFFERED = "Offered"


def enum_column_type(enum_cls: type[enum.Enum]) -> Enum:
    """Store enum values ("Interview Scheduled"), not member names."""
    return Enum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
