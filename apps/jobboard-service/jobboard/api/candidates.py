"""
Candidates API endpoints.

CRUD for candidate records with e-mail uniqueness checks.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.api.deps import ResourceId
from jobboard.db import schemas
from jobboard.db.database import get_db
from jobboard.db.repositories import candidates as repo_candidates
from jobboard.utils import messages

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=List[schemas.Candidate])
def get_all_candidates_endpoint(db: Session = Depends(get_db)):
    return repo_candidates.get_candidates(db)


@router.post("", response_model=schemas.Candidate, status_code=status.HTTP_201_CREATED)
def create_candidate_endpoint(
    candidate: schemas.CandidateCreate,
    db: Session = Depends(get_db),
):
    if repo_candidates.get_candidate_by_email(db, candidate.email):
        raise HTTPException(status_code=400, detail=messages.EMAIL_ALREADY_REGISTERED)
    try:
        return repo_candidates.create_candidate(db, candidate)
    except IntegrityError:
        # Lost a race against a concurrent insert with the same e-mail
        db.rollback()
        raise HTTPException(status_code=400, detail=messages.EMAIL_ALREADY_REGISTERED)


@router.get("/{candidate_id}", response_model=schemas.Candidate)
def get_candidate_endpoint(candidate_id: ResourceId, db: Session = Depends(get_db)):
    db_candidate = repo_candidates.get_candidate(db, candidate_id)
    if not db_candidate:
        raise HTTPException(status_code=404, detail=messages.CANDIDATE_NOT_FOUND)
    return db_candidate


@router.put("/{candidate_id}", response_model=schemas.Candidate)
def update_candidate_endpoint(
    candidate_id: ResourceId,
    candidate: schemas.CandidateUpdate,
    db: Session = Depends(get_db),
):
    if not repo_candidates.get_candidate(db, candidate_id):
        raise HTTPException(status_code=404, detail=messages.CANDIDATE_NOT_FOUND)
    if candidate.email is not None and repo_candidates.get_candidate_by_email(
        db, candidate.email, exclude_id=candidate_id
    ):
        raise HTTPException(status_code=400, detail=messages.EMAIL_ALREADY_REGISTERED)
    try:
        return repo_candidates.update_candidate(db, candidate_id, candidate)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail=messages.EMAIL_ALREADY_REGISTERED)


@router.delete("/{candidate_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_candidate_endpoint(candidate_id: ResourceId, db: Session = Depends(get_db)):
    if not repo_candidates.delete_candidate(db, candidate_id):
        raise HTTPException(status_code=404, detail=messages.CANDIDATE_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
