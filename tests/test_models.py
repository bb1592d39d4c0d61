"""
Tests for job model helpers and request schemas.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from app.models.job import Job, JobStatus, parse_timestamp, statuses_after
from app.schemas.job import JobCreate, JobResponse, JobStatusUpdate


class TestStatusTransitions:
    """Test the forward-only status progression."""

    @pytest.mark.parametrize("current,new", [
        ("open", "open"),
        ("open", "in-progress"),
        ("open", "completed"),
        ("in-progress", "completed"),
        ("completed", "completed"),
    ])
    def test_allowed(self, current, new):
        assert current not in statuses_after(new)

    @pytest.mark.parametrize("current,new", [
        ("in-progress", "open"),
        ("completed", "open"),
        ("completed", "in-progress"),
    ])
    def test_rejected(self, current, new):
        assert current in statuses_after(new)

    def test_nothing_follows_completed(self):
        assert statuses_after("completed") == []


class TestParseTimestamp:
    """Test normalising client timestamps to UTC."""

    def test_zulu(self):
        assert parse_timestamp("2026-02-26T08:00:00Z") == datetime(2026, 2, 26, 8, 0, 0)

    def test_offset_converted_to_utc(self):
        assert parse_timestamp("2026-02-26T10:00:00+05:00") == datetime(2026, 2, 26, 5, 0, 0)

    def test_fraction_kept(self):
        assert parse_timestamp("2026-02-26T08:00:00.500Z") == datetime(2026, 2, 26, 8, 0, 0, 500000)

    def test_naive_taken_as_utc(self):
        assert parse_timestamp("2026-02-26T08:00:00") == datetime(2026, 2, 26, 8, 0, 0)


class TestJobCreateSchema:
    """Test request validation."""

    def test_accepts_camel_case(self, job_payload):
        job = JobCreate(**job_payload)
        assert job.is_high_priority is True
        assert job.posted_by == "Alice"
        assert job.status is JobStatus.OPEN

    def test_keeps_timestamp_verbatim(self, make_payload):
        job = JobCreate(**make_payload(postedAt="2026-02-26T08:00:00.123Z"))
        assert job.posted_at == "2026-02-26T08:00:00.123Z"

    def test_blank_title_rejected(self, make_payload):
        with pytest.raises(ValidationError):
            JobCreate(**make_payload(title="   "))

    def test_non_open_status_rejected(self, make_payload):
        with pytest.raises(ValidationError):
            JobCreate(**make_payload(status="completed"))

    def test_posted_at_utc(self, make_payload):
        job = JobCreate(**make_payload(postedAt="2026-02-26T03:00:00-05:00"))
        assert job.posted_at_utc == datetime(2026, 2, 26, 8, 0, 0)

    def test_city_not_restricted(self, make_payload):
        assert JobCreate(**make_payload(city="Toronto")).city == "Toronto"

    def test_status_update_rejects_unknown(self):
        with pytest.raises(ValidationError):
            JobStatusUpdate(status="done")


class TestJobResponseSchema:
    """Test response shaping from the ORM model."""

    def test_integer_flag_becomes_boolean(self, job_payload):
        record = Job(
            id="a1", title="Clear driveway", description="d", city="Oakville",
            price=40, type="Shoveling", is_high_priority=0,
            posted_at="2026-02-26T08:00:00Z", posted_by="Alice", status="open",
        )

        dumped = JobResponse.model_validate(record).model_dump(by_alias=True)

        assert dumped["isHighPriority"] is False
        assert dumped["postedBy"] == "Alice"
