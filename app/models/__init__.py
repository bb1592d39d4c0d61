# Database models package
from app.models.job import Job, JobStatus, JobType, CITIES

__all__ = [
    "Job",
    "JobStatus",
    "JobType",
    "CITIES",
]
