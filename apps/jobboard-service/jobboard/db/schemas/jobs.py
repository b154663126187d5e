from datetime import datetime
from pydantic import Field, field_validator

from .base import MAX_ID, CamelModel, as_utc, ensure_present
from .candidates import Candidate
from .companies import Company


class JobBase(CamelModel):
    title: str
    description: str
    # Date-only input ("2030-01-31") means midnight UTC
    limit_date: datetime
    company_id: int = Field(ge=1, le=MAX_ID)

    @field_validator("limit_date")
    @classmethod
    def _limit_date(cls, value):
        return as_utc(value)


class JobCreate(JobBase):
    @field_validator("title", "description")
    @classmethod
    def _required(cls, value):
        return ensure_present(value)


class JobUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    limit_date: datetime | None = None
    company_id: int | None = Field(default=None, ge=1, le=MAX_ID)

    @field_validator("limit_date")
    @classmethod
    def _limit_date(cls, value):
        return as_utc(ensure_present(value))

    @field_validator("title", "description", "company_id")
    @classmethod
    def _required(cls, value):
        return ensure_present(value)


class Job(JobBase):
    id: int
    created_at: datetime
    updated_at: datetime


class JobWithRelations(Job):
    company: Company | None = None
    candidates: list[Candidate] = []


class JobCandidatePayload(CamelModel):
    """Body of the addCandidate/removeCandidate endpoints."""
    candidate_id: int | None = Field(default=None, ge=1, le=MAX_ID)


class CompanyWithJobs(Company):
    jobs: list[Job] = []
