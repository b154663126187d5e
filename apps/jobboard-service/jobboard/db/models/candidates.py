from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, false
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Candidate(Base):
    __tablename__ = 'candidates'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(50), nullable=True)
    open_to_work = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    # Applications are written through JobCandidate rows, never via this collection
    jobs = relationship(
        "Job",
        secondary="job_candidates",
        viewonly=True,
        order_by="Job.id",
    )
