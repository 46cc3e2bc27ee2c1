"""
User model for authentication.

Each User owns the jobs it creates. The email column carries a unique index,
which is the authority on duplicate registrations.
"""

import uuid
from sqlalchemy import Column, String, DateTime, Uuid, func
from sqlalchemy.orm import relationship
from jobtracker.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    name = Column(String(50), nullable=False)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    jobs = relationship("Job", back_populates="owner", cascade="all, delete-orphan")

    def __repr__(self):
        # Never include the password hash
        return f"<User(id={self.id}, email='{self.email}')>"
