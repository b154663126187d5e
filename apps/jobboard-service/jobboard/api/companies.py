"""
Companies API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobboard.api.deps import ResourceId
from jobboard.db import schemas
from jobboard.db.database import get_db
from jobboard.db.repositories import companies as repo_companies
from jobboard.utils import messages

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=List[schemas.Company])
def get_all_companies_endpoint(db: Session = Depends(get_db)):
    return repo_companies.get_companies(db)


@router.post("", response_model=schemas.Company, status_code=status.HTTP_201_CREATED)
def create_company_endpoint(company: schemas.CompanyCreate, db: Session = Depends(get_db)):
    return repo_companies.create_company(db, company)


@router.get("/{company_id}", response_model=schemas.CompanyWithJobs)
def get_company_endpoint(company_id: ResourceId, db: Session = Depends(get_db)):
    """Return a company with the jobs it posted."""
    db_company = repo_companies.get_company(db, company_id, with_jobs=True)
    if not db_company:
        raise HTTPException(status_code=404, detail=messages.COMPANY_NOT_FOUND)
    return db_company


@router.put("/{company_id}", response_model=schemas.Company)
def update_company_endpoint(
    company_id: ResourceId,
    company: schemas.CompanyUpdate,
    db: Session = Depends(get_db),
):
    db_company = repo_companies.update_company(db, company_id, company)
    if not db_company:
        raise HTTPException(status_code=404, detail=messages.COMPANY_NOT_FOUND)
    return db_company


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company_endpoint(company_id: ResourceId, db: Session = Depends(get_db)):
    if not repo_companies.delete_company(db, company_id):
        raise HTTPException(status_code=404, detail=messages.COMPANY_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
