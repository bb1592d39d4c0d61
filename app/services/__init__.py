# Services package - business logic
from app.services.job_store import JobStore, JobStoreError, DuplicateJobError

__all__ = [
    "JobStore",
    "JobStoreError",
    "DuplicateJobError",
]
