"""
Jobs API endpoints.

CRUD for job postings and application management: candidates are
registered on a job with `addCandidate` and withdrawn with `removeCandidate`.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.api.deps import ResourceId
from jobboard.db import schemas
from jobboard.db.database import get_db
from jobboard.db.repositories import candidates as repo_candidates
from jobboard.db.repositories import companies as repo_companies
from jobboard.db.repositories import jobs as repo_jobs
from jobboard.utils import messages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _require_company(db: Session, company_id: int) -> None:
    if not repo_companies.get_company(db, company_id):
        raise HTTPException(status_code=400, detail=messages.COMPANY_NOT_FOUND)


def _require_candidate_id(payload: Optional[schemas.JobCandidatePayload]) -> int:
    if payload is None or payload.candidate_id is None:
        raise HTTPException(status_code=400, detail=messages.CANDIDATE_ID_REQUIRED)
    return payload.candidate_id


@router.get("", response_model=List[schemas.Job])
def get_all_jobs_endpoint(db: Session = Depends(get_db)):
    return repo_jobs.get_jobs(db)


@router.post("", response_model=schemas.Job, status_code=status.HTTP_201_CREATED)
def create_job_endpoint(job: schemas.JobCreate, db: Session = Depends(get_db)):
    _require_company(db, job.company_id)
    return repo_jobs.create_job(db, job)


@router.get("/{job_id}", response_model=schemas.JobWithRelations)
def get_job_endpoint(job_id: ResourceId, db: Session = Depends(get_db)):
    """Return a job with its company and the candidates registered on it."""
    db_job = repo_jobs.get_job(db, job_id, with_relations=True)
    if not db_job:
        raise HTTPException(status_code=404, detail=messages.JOB_NOT_FOUND)
    return db_job


@router.put("/{job_id}", response_model=schemas.Job)
def update_job_endpoint(job_id: ResourceId, job: schemas.JobUpdate, db: Session = Depends(get_db)):
    if not repo_jobs.get_job(db, job_id):
        raise HTTPException(status_code=404, detail=messages.JOB_NOT_FOUND)
    if job.company_id is not None:
        _require_company(db, job.company_id)
    return repo_jobs.update_job(db, job_id, job)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job_endpoint(job_id: ResourceId, db: Session = Depends(get_db)):
    if not repo_jobs.delete_job(db, job_id):
        raise HTTPException(status_code=404, detail=messages.JOB_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{job_id}/addCandidate", status_code=status.HTTP_201_CREATED)
def add_candidate_endpoint(
    job_id: ResourceId,
    payload: Optional[schemas.JobCandidatePayload] = Body(default=None),
    db: Session = Depends(get_db),
):
    candidate_id = _require_candidate_id(payload)
    if not repo_jobs.get_job(db, job_id):
        raise HTTPException(status_code=404, detail=messages.JOB_NOT_FOUND)
    if not repo_candidates.get_candidate(db, candidate_id):
        raise HTTPException(status_code=404, detail=messages.CANDIDATE_NOT_FOUND)
    if repo_jobs.get_job_candidate(db, job_id, candidate_id):
        logger.info("job_candidate_duplicate job_id=%s candidate_id=%s", job_id, candidate_id)
        raise HTTPException(status_code=400, detail=messages.CANDIDATE_ALREADY_APPLIED)
    try:
        repo_jobs.add_candidate_to_job(db, job_id, candidate_id)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail=messages.CANDIDATE_ALREADY_APPLIED)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/{job_id}/removeCandidate", status_code=status.HTTP_204_NO_CONTENT)
def remove_candidate_endpoint(
    job_id: ResourceId,
    payload: Optional[schemas.JobCandidatePayload] = Body(default=None),
    db: Session = Depends(get_db),
):
    candidate_id = _require_candidate_id(payload)
    if not repo_jobs.get_job(db, job_id):
        raise HTTPException(status_code=404, detail=messages.JOB_NOT_FOUND)
    repo_jobs.remove_candidate_from_job(db, job_id, candidate_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
