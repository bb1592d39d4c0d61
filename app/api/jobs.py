"""
Jobs API Routes
Handles posting, listing, accepting and cancelling snow-clearing jobs.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_job_store
from app.models.job import JobStatus, JobType, statuses_after
from app.schemas.job import (
    ErrorResponse, JobCreate, JobResponse, JobStatusUpdate, OperationResult,
)
from app.services.job_store import DuplicateJobError, JobStore, JobStoreError

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.get("", response_model=List[JobResponse], responses=ERROR_RESPONSES)
def list_jobs(
    city: Optional[str] = None,
    job_type: Optional[JobType] = Query(default=None, alias="type"),
    job_status: Optional[JobStatus] = Query(default=None, alias="status"),
    store: JobStore = Depends(get_job_store),
):
    """List jobs, newest first. All jobs are returned unless filters are given."""
    try:
        return store.list_jobs(
            city=city,
            job_type=job_type.value if job_type else None,
            status=job_status.value if job_status else None,
        )
    except JobStoreError as e:
        logger.error(f"Error listing jobs: {e.cause or e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch jobs"
        )


@router.get("/{job_id}", response_model=JobResponse, responses={404: {"model": ErrorResponse}, **ERROR_RESPONSES})
def get_job(
    job_id: str,
    store: JobStore = Depends(get_job_store),
):
    """Get a single job."""
    try:
        job = store.get(job_id)
    except JobStoreError as e:
        logger.error(f"Error loading job {job_id}: {e.cause or e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch job"
        )

    if job is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found"
        )
    return job


@router.post("", response_model=OperationResult, status_code=status.HTTP_201_CREATED, responses=ERROR_RESPONSES)
def create_job(
    job: JobCreate,
    store: JobStore = Depends(get_job_store),
):
    """Post a new job. Duplicate ids and storage errors both map to 500."""
    try:
        store.create(job)
    except DuplicateJobError as e:
        logger.warning(f"Error creating job: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job"
        )
    except JobStoreError as e:
        logger.error(f"Error creating job {job.id}: {e.cause or e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job"
        )
    return OperationResult()


@router.patch("/{job_id}", response_model=OperationResult, responses={409: {"model": ErrorResponse}, **ERROR_RESPONSES})
def update_job_status(
    job_id: str,
    update: JobStatusUpdate,
    store: JobStore = Depends(get_job_store),
):
    """
    Change a job's status (e.g. a helper accepting an open job).

    Status only moves forward: open -> in-progress -> completed.
    Updating a job that does not exist succeeds without changing anything.
    """
    new_status = update.status.value
    try:
        changed = store.set_status(job_id, new_status, blocked_from=statuses_after(new_status))
        # Nothing changed: either the job is missing (fine) or it is past new_status
        blocked = not changed and store.get(job_id) is not None
    except JobStoreError as e:
        logger.error(f"Error updating job {job_id}: {e.cause or e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update job"
        )

    if blocked:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Invalid status transition"
        )
    return OperationResult()


@router.delete("/{job_id}", response_model=OperationResult, responses=ERROR_RESPONSES)
def delete_job(
    job_id: str,
    store: JobStore = Depends(get_job_store),
):
    """Cancel a job by deleting it. Deleting a missing job succeeds."""
    try:
        store.delete(job_id)
    except JobStoreError as e:
        logger.error(f"Error deleting job {job_id}: {e.cause or e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete job"
        )
    return OperationResult()
