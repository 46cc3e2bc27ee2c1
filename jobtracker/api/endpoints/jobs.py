import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from jobtracker.core.database import get_db
from jobtracker.core.deps import Identity, get_current_identity
from jobtracker.core.errors import NotFound
from jobtracker.crud import job as job_crud
from jobtracker.models.job import JobStatus
from jobtracker.schemas.job import (
    JobCreateRequest,
    JobEnvelope,
    JobListResponse,
    JobResponse,
    JobUpdateRequest,
)

# Every route below requires a verified identity
router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
    dependencies=[Depends(get_current_identity)],
)
logger = logging.getLogger(__name__)


def _not_found(job_id: int) -> NotFound:
    return NotFound(f"No job with id {job_id}")


@router.get("", response_model=JobListResponse)
def list_jobs(
    status: Optional[JobStatus] = None,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """
    List the caller's jobs, oldest first.

    Args:
        status: Optional filter by job status (interview, declined, pending)
    """
    jobs = job_crud.get_multi(db, identity.user_id, status=status)
    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in jobs],
        count=len(jobs),
    )


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(
    job_id: int,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """
    Retrieve a job by ID.

    A job owned by another user is reported as not found.
    """
    job = job_crud.get_by_id(db, identity.user_id, job_id)

    if not job:
        raise _not_found(job_id)

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Create a new job owned by the caller."""
    new_job = job_crud.create(db, identity.user_id, request)

    logger.info(f"Created job {new_job.id} for user {identity.user_id}")

    return JobEnvelope(job=JobResponse.model_validate(new_job))


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Partially update a job. Only the fields sent are changed."""
    job = job_crud.update(db, identity.user_id, job_id, request)

    if not job:
        raise _not_found(job_id)

    logger.info(f"Updated job {job_id} for user {identity.user_id}")

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete("/{job_id}", status_code=status.HTTP_200_OK)
def delete_job(
    job_id: int,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """
    Delete a job by ID.
    """
    deleted = job_crud.delete(db, identity.user_id, job_id)

    if not deleted:
        raise _not_found(job_id)

    logger.info(f"Deleted job {job_id} for user {identity.user_id}")
    return Response(status_code=status.HTTP_200_OK)
