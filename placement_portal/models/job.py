from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from placement_portal.database import Base
from placement_portal.models.enums import JobStatus, enum_column_type


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    # Copied from the recruiter (or the college placement cell) at posting time
    company = Column(String, nullable=False)
    recruiter_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    college_id = Column(String, ForeignKey("colleges.id", ondelete="CASCADE"), nullable=False, index=True)
    location = Column(String)
    salary = Column(String)
    deadline = Column(DateTime(timezone=True))
    status = Column(enum_column_type(JobStatus), nullable=False, default=JobStatus.PENDING)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    recruiter = relationship("User", back_populates="posted_jobs", foreign_keys=[recruiter_id])
    college = relationship("College", back_populates="jobs")
    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
