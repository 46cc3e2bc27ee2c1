from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from jobtracker.models.job import JobStatus


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field} cannot be empty")
    return value.strip()


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    company: str = Field(..., max_length=50)
    position: str = Field(..., max_length=100)
    status: JobStatus = JobStatus.PENDING

    @field_validator('company')
    @classmethod
    def company_not_blank(cls, v: str) -> str:
        return _require_text(v, "Company")

    @field_validator('position')
    @classmethod
    def position_not_blank(cls, v: str) -> str:
        return _require_text(v, "Position")


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Omitted fields are left untouched; a field that is sent must not be empty.
    """
    company: Optional[str] = Field(None, max_length=50)
    position: Optional[str] = Field(None, max_length=100)
    status: Optional[JobStatus] = None

    @field_validator('company')
    @classmethod
    def company_not_blank(cls, v: Optional[str]) -> str:
        return _require_text(v, "Company")

    @field_validator('position')
    @classmethod
    def position_not_blank(cls, v: Optional[str]) -> str:
        return _require_text(v, "Position")

    @field_validator('status')
    @classmethod
    def status_not_null(cls, v: Optional[JobStatus]) -> JobStatus:
        if v is None:
            raise ValueError("Status cannot be null")
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    company: str
    position: str
    status: JobStatus
    created_by: UUID
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: List[JobResponse]
    count: int
