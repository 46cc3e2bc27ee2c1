import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from jobtracker.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Application status for a tracked job.

    - INTERVIEW: an interview is scheduled or done
    - DECLINED: the application was rejected
    - PENDING: no answer yet
    """
    INTERVIEW = "interview"
    DECLINED = "declined"
    PENDING = "pending"


class Job(Base):
    """
    A job application tracked by a single user.

    created_by is set once at creation and every query filters on it.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    company = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False)
    status = Column(Enum(JobStatus), default=JobStatus.PENDING, nullable=False, index=True)

    # Ownership boundary
    created_by = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    owner = relationship("User", back_populates="jobs")

    def __repr__(self):
        return f"<Job(id={self.id}, company='{self.company}', status={self.status.value})>"
