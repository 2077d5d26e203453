from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from placement_portal.database import Base


class College(Base):
    """Named directory entry that students, college officers and jobs point at."""

    __tablename__ = "colleges"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    users = relationship("User", back_populates="college")
    jobs = relationship("Job", back_populates="college")
