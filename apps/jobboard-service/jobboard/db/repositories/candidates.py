"""
Candidate repository functions.

Implements create/read/update/delete for candidates, including the e-mail
lookup used for the uniqueness check.
"""
from __future__ import annotations

import logging
from typing import Optional
from sqlalchemy.orm import Session

from jobboard.db import models, schemas

logger = logging.getLogger(__name__)


def create_candidate(db: Session, candidate: schemas.CandidateCreate):
    db_candidate = models.Candidate(**candidate.model_dump())
    db.add(db_candidate)
    db.commit()
    db.refresh(db_candidate)
    logger.info("candidate_created id=%s", db_candidate.id)
    return db_candidate


def get_candidate(db: Session, candidate_id: int):
    return db.query(models.Candidate).filter(models.Candidate.id == candidate_id).first()


def get_candidate_by_email(db: Session, email: str, *, exclude_id: Optional[int] = None):
    q = db.query(models.Candidate).filter(models.Candidate.email == email)
    if exclude_id is not None:
        q = q.filter(models.Candidate.id != exclude_id)
    return q.first()


def get_candidates(db: Session):
    return db.query(models.Candidate).order_by(models.Candidate.id).all()


def update_candidate(db: Session, candidate_id: int, candidate: schemas.CandidateUpdate):
    db_candidate = get_candidate(db, candidate_id)
    if db_candidate:
        for key, value in candidate.model_dump(exclude_unset=True).items():
            setattr(db_candidate, key, value)
        db.commit()
        db.refresh(db_candidate)
        logger.info("candidate_updated id=%s", candidate_id)
    return db_candidate


def delete_candidate(db: Session, candidate_id: int) -> bool:
    """Delete a candidate and withdraw every application it made."""
    try:
        db_candidate = get_candidate(db, candidate_id)
        if not db_candidate:
            return False
        db.query(models.JobCandidate).filter(
            models.JobCandidate.candidate_id == candidate_id
        ).delete(synchronize_session=False)
        db.delete(db_candidate)
        db.commit()
        logger.info("candidate_deleted id=%s", candidate_id)
        return True
    except Exception as e:
        db.rollback()
        logger.error("candidate_delete_failed id=%s error=%s", candidate_id, e)
        raise RuntimeError(f"Failed to delete candidate {candidate_id}: {str(e)}")
