"""
CRUD operations for Job model.

Every function takes the owner's id and applies it in the query itself, so a
job owned by someone else behaves exactly like a job that does not exist.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from jobtracker.core.errors import BadRequest
from jobtracker.models.job import Job, JobStatus
from jobtracker.schemas.job import JobCreateRequest, JobUpdateRequest

# Job.id is a 32-bit INTEGER column
MAX_JOB_ID = 2**31 - 1


def _check_not_empty(**fields) -> None:
    for field, value in fields.items():
        if value is None or not str(value).strip():
            raise BadRequest(f"Please provide {field}")


def _owned(db: Session, owner_id: UUID):
    return db.query(Job).filter(Job.created_by == owner_id)


def create(db: Session, owner_id: UUID, job_data: JobCreateRequest) -> Job:
    """
    Create a new job owned by owner_id.

    Raises:
        BadRequest: company or position is empty
    """
    _check_not_empty(company=job_data.company, position=job_data.position)

    db_job = Job(
        company=job_data.company,
        position=job_data.position,
        status=job_data.status or JobStatus.PENDING,
        created_by=owner_id,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, owner_id: UUID, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if it exists and belongs to owner_id, None otherwise
    """
    if not 1 <= job_id <= MAX_JOB_ID:
        return None
    return _owned(db, owner_id).filter(Job.id == job_id).first()


def get_multi(
    db: Session,
    owner_id: UUID,
    status: Optional[JobStatus] = None
) -> List[Job]:
    """
    List the owner's jobs, oldest first.

    Args:
        db: Database session
        owner_id: Requesting user's id
        status: Optional status filter
    """
    query = _owned(db, owner_id)

    if status:
        query = query.filter(Job.status == status)

    return query.order_by(Job.created_at.asc(), Job.id.asc()).all()


def update(
    db: Session,
    owner_id: UUID,
    job_id: int,
    job_data: JobUpdateRequest
) -> Optional[Job]:
    """
    Apply a partial update to an owned job.

    Only fields present in the request are changed. Validation happens
    before the lookup so a rejected update never touches the row.

    Returns:
        Updated Job instance if found, None otherwise

    Raises:
        BadRequest: company or position sent but empty
    """
    changes = job_data.model_dump(exclude_unset=True)
    _check_not_empty(**{k: v for k, v in changes.items() if k in ("company", "position")})
    if "status" in changes and changes["status"] is None:
        raise BadRequest("Please provide status")

    job = get_by_id(db, owner_id, job_id)
    if not job:
        return None

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, owner_id: UUID, job_id: int) -> bool:
    """
    Delete an owned job.

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, owner_id, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True
