from datetime import datetime
from pydantic import EmailStr, field_validator

from .base import CamelModel, ensure_present


class CompanyBase(CamelModel):
    name: str
    bio: str | None = None
    email: EmailStr | None = None
    website: str | None = None


class CompanyCreate(CompanyBase):
    @field_validator("name")
    @classmethod
    def _required(cls, value):
        return ensure_present(value)


class CompanyUpdate(CamelModel):
    name: str | None = None
    bio: str | None = None
    email: EmailStr | None = None
    website: str | None = None

    @field_validator("name")
    @classmethod
    def _required(cls, value):
        return ensure_present(value)


class Company(CompanyBase):
    id: int
    created_at: datetime
    updated_at: datetime
