"""
Job Model
Database model for snow-clearing job postings.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List
from sqlalchemy import Column, DateTime, Integer, String, Text

from app.core.database import Base


CITIES = [
    "Mississauga", "Oakville", "Brampton", "Markham",
    "Vaughan", "Richmond Hill", "Burlington", "Milton", "Guelph",
]


class JobType(str, Enum):
    """Kind of work requested."""
    SHOVELING = "Shoveling"
    SALTING = "Salting"
    SCRAPING = "Scraping"


class JobStatus(str, Enum):
    """Job lifecycle status."""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


# Position of each status in the open -> in-progress -> completed progression
STATUS_ORDER = {
    JobStatus.OPEN.value: 0,
    JobStatus.IN_PROGRESS.value: 1,
    JobStatus.COMPLETED.value: 2,
}


def statuses_after(status: str) -> List[str]:
    """Statuses a job may not leave to go back to `status`.

    A job moves only forward, so an update to `status` is refused for jobs
    already past it. Setting the same status again is allowed, and rows
    holding an unknown value are never blocked.
    """
    rank = STATUS_ORDER[status]
    return [s for s, order in STATUS_ORDER.items() if order > rank]


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into a naive UTC datetime.

    A trailing `Z` is accepted; values without an offset are taken as UTC.
    """
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class Job(Base):
    """Job posting model. Column names match the client's JSON keys."""

    __tablename__ = "jobs"

    id = Column(String, primary_key=True)  # client-generated
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)
    type = Column(Text, nullable=False)

    # Stored as 0/1
    is_high_priority = Column("isHighPriority", Integer, nullable=False)

    # ISO-8601 string exactly as sent by the client
    posted_at = Column("postedAt", Text, nullable=False)
    # Same instant normalised to UTC; used for ordering
    posted_at_utc = Column("postedAtUtc", DateTime, nullable=False, index=True)
    posted_by = Column("postedBy", Text, nullable=False)

    # Status: open, in-progress, completed
    status = Column(Text, nullable=False)

    def to_dict(self) -> dict:
        """Return the job in wire shape with the priority flag as a boolean."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "city": self.city,
            "price": self.price,
            "type": self.type,
            "isHighPriority": bool(self.is_high_priority),
            "postedAt": self.posted_at,
            "postedBy": self.posted_by,
            "status": self.status,
        }
