"""
Company repository functions.

Deleting a company removes its jobs and the applications to those jobs.
"""
from __future__ import annotations

import logging
from sqlalchemy.orm import Session, selectinload

from jobboard.db import models, schemas

logger = logging.getLogger(__name__)


def create_company(db: Session, company: schemas.CompanyCreate):
    db_company = models.Company(**company.model_dump())
    db.add(db_company)
    db.commit()
    db.refresh(db_company)
    logger.info("company_created id=%s", db_company.id)
    return db_company


def get_company(db: Session, company_id: int, *, with_jobs: bool = False):
    q = db.query(models.Company)
    if with_jobs:
        q = q.options(selectinload(models.Company.jobs))
    return q.filter(models.Company.id == company_id).first()


def get_companies(db: Session):
    return db.query(models.Company).order_by(models.Company.id).all()


def update_company(db: Session, company_id: int, company: schemas.CompanyUpdate):
    db_company = get_company(db, company_id)
    if db_company:
        for key, value in company.model_dump(exclude_unset=True).items():
            setattr(db_company, key, value)
        db.commit()
        db.refresh(db_company)
        logger.info("company_updated id=%s", company_id)
    return db_company


def delete_company(db: Session, company_id: int) -> bool:
    try:
        db_company = get_company(db, company_id)
        if not db_company:
            return False
        job_ids = db.query(models.Job.id).filter(models.Job.company_id == company_id)
        db.query(models.JobCandidate).filter(
            models.JobCandidate.job_id.in_(job_ids.scalar_subquery())
        ).delete(synchronize_session=False)
        deleted_jobs = db.query(models.Job).filter(
            models.Job.company_id == company_id
        ).delete(synchronize_session=False)
        db.delete(db_company)
        db.commit()
        logger.info("company_deleted id=%s jobs_deleted=%s", company_id, deleted_jobs)
        return True
    except Exception as e:
        db.rollback()
        logger.error("company_delete_failed id=%s error=%s", company_id, e)
        raise RuntimeError(f"Failed to delete company {company_id}: {str(e)}")
