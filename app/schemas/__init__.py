# Pydantic schemas package
from app.schemas.job import (
    JobCreate, JobStatusUpdate, JobResponse,
    OperationResult, ErrorResponse, MetaResponse,
)

__all__ = [
    "JobCreate", "JobStatusUpdate", "JobResponse",
    "OperationResult", "ErrorResponse", "MetaResponse",
]
