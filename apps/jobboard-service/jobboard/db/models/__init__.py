"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc` and all ORM classes from a single import point.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .candidates import Candidate
from .companies import Company
from .jobs import Job, JobCandidate

__all__ = [
    # base
    "Base",
    "now_utc",
    # resources
    "Candidate",
    "Company",
    "Job",
    # applications
    "JobCandidate",
]
