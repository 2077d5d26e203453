from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from placement_portal.database import Base
from placement_portal.models.enums import ApplicationStatus, enum_column_type


class Application(Base):
    """A student's candidacy for one job. One row per (student, job)."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("student_id", "job_id", name="uq_application_student_job"),
    )

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(enum_column_type(ApplicationStatus), nullable=False, default=ApplicationStatus.APPLIED)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    student = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")
