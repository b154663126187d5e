from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Company(Base):
    __tablename__ = 'companies'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    jobs = relationship("Job", back_populates="company", passive_deletes=True, order_by="Job.id")
