from datetime import datetime
from pydantic import EmailStr, field_validator

from .base import CamelModel, ensure_present


class CandidateBase(CamelModel):
    name: str
    bio: str | None = None
    email: EmailStr
    phone: str | None = None
    open_to_work: bool = False


class CandidateCreate(CandidateBase):
    @field_validator("name")
    @classmethod
    def _required(cls, value):
        return ensure_present(value)


class CandidateUpdate(CamelModel):
    name: str | None = None
    bio: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    open_to_work: bool | None = None

    # Defaults are not validated, so these only fire for fields the client sent
    @field_validator("name", "email", "open_to_work")
    @classmethod
    def _required(cls, value):
        return ensure_present(value)


class Candidate(CandidateBase):
    id: int
    created_at: datetime
    updated_at: datetime
