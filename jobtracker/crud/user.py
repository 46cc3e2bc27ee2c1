"""
CRUD operations for User model (the credential store).

Passwords arrive here already hashed; this module never sees plaintext.
"""

from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobtracker.core.errors import DuplicateCredential
from jobtracker.models.user import User


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup. Emails compare case-insensitively."""
    return email.strip().lower()


def get_by_email(db: Session, email: str) -> Optional[User]:
    """Look up a user by login email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create(db: Session, name: str, email: str, hashed_password: str) -> User:
    """
    Persist a new user.

    Uniqueness of email is decided by the database index at insert time,
    so two concurrent registrations cannot both succeed.

    Raises:
        DuplicateCredential: email already registered
    """
    db_user = User(name=name, email=normalize_email(email), hashed_password=hashed_password)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateCredential()

    db.refresh(db_user)
    return db_user
