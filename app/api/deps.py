"""
API Dependencies
Common dependencies for FastAPI routes (database sessions, job store).
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.services.job_store import JobStore


def get_db() -> Generator:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_job_store(db: Session = Depends(get_db)) -> JobStore:
    """Job store bound to the request's session."""
    return JobStore(db)
