from sqlalchemy import Column, String, Float, DateTime, ForeignKey, JSON, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from placement_portal.database import Base
from placement_portal.models.enums import Role, enum_column_type

# Composite primary key gives the saved-job list set semantics.
saved_jobs = Table(
    "saved_jobs",
    Base.metadata,
    Column("user_id", String, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("job_id", String, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(enum_column_type(Role), nullable=False)
    college_id = Column(String, ForeignKey("colleges.id", ondelete="SET NULL"), nullable=True, index=True)
    company = Column(String, nullable=True)

    # Student profile
    branch = Column(String, nullable=True)
    cgpa = Column(Float, nullable=True)
    skills = Column(JSON, nullable=True)
    resume = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    college = relationship("College", back_populates="users")
    projects = relationship(
        "Project",
        back_populates="owner",
        order_by="Project.created_at",
        cascade="all, delete-orphan",
    )
    saved_jobs = relationship("Job", secondary=saved_jobs, order_by="Job.created_at.desc()")
    posted_jobs = relationship("Job", back_populates="recruiter", foreign_keys="Job.recruiter_id")
    applications = relationship("Application", back_populates="student")
