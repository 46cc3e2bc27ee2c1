"""
Database models package.
"""

from jobtracker.models.job import Job, JobStatus
from jobtracker.models.user import User

__all__ = ["Job", "JobStatus", "User"]
