"""
Job repository functions.

CRUD for jobs plus application management: registering a candidate on a
job and withdrawing it. A (job, candidate) pair exists at most once.
"""
from __future__ import annotations

import logging
from typing import List
from sqlalchemy.orm import Session, selectinload

from jobboard.db import models, schemas

logger = logging.getLogger(__name__)


def create_job(db: Session, job: schemas.JobCreate):
    db_job = models.Job(**job.model_dump())
    db.add(db_job)
    db.commit()
    db.refresh(db_job)
    logger.info("job_created id=%s company_id=%s", db_job.id, db_job.company_id)
    return db_job


def get_job(db: Session, job_id: int, *, with_relations: bool = False):
    q = db.query(models.Job)
    if with_relations:
        q = q.options(
            selectinload(models.Job.company),
            selectinload(models.Job.candidates),
        )
    return q.filter(models.Job.id == job_id).first()


def get_jobs(db: Session):
    return db.query(models.Job).order_by(models.Job.id).all()


def update_job(db: Session, job_id: int, job: schemas.JobUpdate):
    db_job = get_job(db, job_id)
    if db_job:
        for key, value in job.model_dump(exclude_unset=True).items():
            setattr(db_job, key, value)
        db.commit()
        db.refresh(db_job)
        logger.info("job_updated id=%s", job_id)
    return db_job


def delete_job(db: Session, job_id: int) -> bool:
    """Delete a job together with its applications."""
    try:
        db_job = get_job(db, job_id)
        if not db_job:
            return False
        db.query(models.JobCandidate).filter(
            models.JobCandidate.job_id == job_id
        ).delete(synchronize_session=False)
        db.delete(db_job)
        db.commit()
        logger.info("job_deleted id=%s", job_id)
        return True
    except Exception as e:
        db.rollback()
        logger.error("job_delete_failed id=%s error=%s", job_id, e)
        raise RuntimeError(f"Failed to delete job {job_id}: {str(e)}")


# Applications
def get_job_candidate(db: Session, job_id: int, candidate_id: int):
    return db.query(models.JobCandidate).filter(
        models.JobCandidate.job_id == job_id,
        models.JobCandidate.candidate_id == candidate_id,
    ).first()


def get_job_candidates(db: Session, job_id: int) -> List[models.Candidate]:
    return (
        db.query(models.Candidate)
        .join(models.JobCandidate, models.JobCandidate.candidate_id == models.Candidate.id)
        .filter(models.JobCandidate.job_id == job_id)
        .order_by(models.Candidate.id)
        .all()
    )


def add_candidate_to_job(db: Session, job_id: int, candidate_id: int):
    db_application = models.JobCandidate(job_id=job_id, candidate_id=candidate_id)
    db.add(db_application)
    db.commit()
    db.refresh(db_application)
    logger.info("job_candidate_added job_id=%s candidate_id=%s", job_id, candidate_id)
    return db_application


def remove_candidate_from_job(db: Session, job_id: int, candidate_id: int) -> bool:
    """Withdraw an application; returns False when there was nothing to remove."""
    removed = db.query(models.JobCandidate).filter(
        models.JobCandidate.job_id == job_id,
        models.JobCandidate.candidate_id == candidate_id,
    ).delete(synchronize_session=False)
    db.commit()
    if removed:
        logger.info("job_candidate_removed job_id=%s candidate_id=%s", job_id, candidate_id)
    return bool(removed)
