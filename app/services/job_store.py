"""
Job Store Service
Persists job postings: create, list, status updates and deletion.
"""

import logging
from typing import Iterable, Optional, List

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.job import Job
from app.schemas.job import JobCreate

logger = logging.getLogger(__name__)


class JobStoreError(Exception):
    """Storage failure while reading or writing jobs."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class DuplicateJobError(JobStoreError):
    """A job with the same id already exists."""

    def __init__(self, job_id: str, cause: Optional[Exception] = None):
        super().__init__(f"Job already exists: {job_id}", cause)
        self.job_id = job_id


class JobStore:
    """
    Service for job persistence.

    Handles:
    - Listing jobs newest first, optionally filtered
    - Inserting new jobs (id must be unique)
    - Setting a job's status
    - Deleting a job

    Updates and deletes on a missing id are no-ops and do not raise.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- Reads ---

    def list_jobs(
        self,
        city: Optional[str] = None,
        job_type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Job]:
        """
        List jobs, most recently posted first.

        Args:
            city: Only jobs in this city
            job_type: Only jobs of this type
            status: Only jobs with this status

        Returns:
            All matching jobs; every job when no filter is given
        """
        try:
            query = self.db.query(Job)
            if city:
                query = query.filter(Job.city == city)
            if job_type:
                query = query.filter(Job.type == job_type)
            if status:
                query = query.filter(Job.status == status)
            return query.order_by(Job.posted_at_utc.desc(), Job.id).all()
        except SQLAlchemyError as e:
            raise JobStoreError("Failed to list jobs", e) from e

    def get(self, job_id: str) -> Optional[Job]:
        """Get a job by ID."""
        try:
            return self.db.get(Job, job_id)
        except SQLAlchemyError as e:
            raise JobStoreError(f"Failed to load job {job_id}", e) from e

    # --- Writes ---

    def create(self, job: JobCreate) -> Job:
        """
        Insert a new job.

        Raises:
            DuplicateJobError: if the id is already taken
            JobStoreError: on any other storage failure
        """
        if self.get(job.id) is not None:
            raise DuplicateJobError(job.id)

        record = Job(
            id=job.id,
            title=job.title,
            description=job.description,
            city=job.city,
            price=job.price,
            type=job.type.value,
            is_high_priority=1 if job.is_high_priority else 0,
            posted_at=job.posted_at,
            posted_at_utc=job.posted_at_utc,
            posted_by=job.posted_by,
            status=job.status.value,
        )
        try:
            self.db.add(record)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateJobError(job.id, e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise JobStoreError(f"Failed to create job {job.id}", e) from e

        logger.info(f"Created job {job.id} ({job.type.value} in {job.city}) for {job.posted_by}")
        return record

    def set_status(
        self,
        job_id: str,
        status: str,
        blocked_from: Optional[Iterable[str]] = None,
    ) -> int:
        """
        Set a job's status. The value is stored as given.

        Args:
            job_id: Job to update
            status: New status
            blocked_from: Leave the job alone if its current status is one of
                these. Checked in the same UPDATE statement.

        Returns:
            Number of rows changed (0 when the job does not exist or is blocked)
        """
        try:
            stmt = update(Job).where(Job.id == job_id).values(status=status)
            if blocked_from:
                stmt = stmt.where(Job.status.not_in(list(blocked_from)))
            # commit expires loaded jobs, so no in-session sync is needed
            result = self.db.execute(stmt, execution_options={"synchronize_session": False})
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise JobStoreError(f"Failed to update job {job_id}", e) from e

        if result.rowcount:
            logger.info(f"Job {job_id} status -> {status}")
        else:
            logger.debug(f"Status update for job {job_id} matched no row")
        return result.rowcount

    def delete(self, job_id: str) -> int:
        """
        Delete a job permanently.

        Returns:
            Number of rows removed (0 when the job does not exist)
        """
        try:
            result = self.db.execute(
                delete(Job)
                .where(Job.id == job_id)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise JobStoreError(f"Failed to delete job {job_id}", e) from e

        if result.rowcount:
            logger.info(f"Deleted job {job_id}")
        else:
            logger.debug(f"Delete for missing job {job_id} ignored")
        return result.rowcount
