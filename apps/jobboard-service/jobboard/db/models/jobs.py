from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Job(Base):
    __tablename__ = 'jobs'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    limit_date = Column(DateTime(timezone=True), nullable=False)
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    company = relationship("Company", back_populates="jobs")
    candidates = relationship(
        "Candidate",
        secondary="job_candidates",
        viewonly=True,
        order_by="Candidate.id",
    )

    __table_args__ = (
        Index('idx_jobs_company_id', 'company_id'),
    )


class JobCandidate(Base):
    """A job application: one candidate registered on one job."""
    __tablename__ = 'job_candidates'
    job_id = Column(Integer, ForeignKey('jobs.id', ondelete='CASCADE'), primary_key=True)
    candidate_id = Column(Integer, ForeignKey('candidates.id', ondelete='CASCADE'), primary_key=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_job_candidates_candidate_id', 'candidate_id'),
    )
