"""
Domain-split Pydantic schemas re-exported from one module.
"""

# Import order: define base/simple types first to satisfy forward refs
from .base import CamelModel
from .candidates import CandidateBase, CandidateCreate, CandidateUpdate, Candidate
from .companies import CompanyBase, CompanyCreate, CompanyUpdate, Company
from .jobs import (
    JobBase,
    JobCreate,
    JobUpdate,
    Job,
    JobWithRelations,
    JobCandidatePayload,
    CompanyWithJobs,
)

__all__ = [
    "CamelModel",
    # Candidates
    "CandidateBase",
    "CandidateCreate",
    "CandidateUpdate",
    "Candidate",
    # Companies
    "CompanyBase",
    "CompanyCreate",
    "CompanyUpdate",
    "Company",
    "CompanyWithJobs",
    # Jobs
    "JobBase",
    "JobCreate",
    "JobUpdate",
    "Job",
    "JobWithRelations",
    "JobCandidatePayload",
]
