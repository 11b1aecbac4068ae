"""
Candidate management routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.validators import parse_positive_int
from app.candidate_management.dependencies import get_disengagement_scheduler
from app.candidate_management.lifecycle import DisengagementScheduler
from app.candidate_management.schemas import (
    CandidateManagementCreate,
    CandidateManagementResponse,
    CandidateManagementDetailResponse,
)
from app.candidate_management.service import candidate_management_service

router = APIRouter(prefix="/api/candidate_management", tags=["Candidate Management"])


@router.get("", response_model=List[CandidateManagementDetailResponse])
def list_candidate_management(
    company_id: Optional[str] = Query(None, description="Company owning the engagements"),
    db: Session = Depends(get_db),
):
    """List a company's candidate management records with candidate data"""
    owner_id = parse_positive_int(company_id, "company_id", message="Invalid company ID")
    records = candidate_management_service.list_for_company(db, owner_id)
    return [CandidateManagementDetailResponse.model_validate(r) for r in records]


@router.post("", response_model=CandidateManagementResponse, status_code=status.HTTP_201_CREATED)
def create_candidate_management(
    payload: CandidateManagementCreate,
    db: Session = Depends(get_db),
    scheduler: DisengagementScheduler = Depends(get_disengagement_scheduler),
):
    """Assign a candidate to an engagement"""
    record = candidate_management_service.create(db, payload, scheduler)
    return CandidateManagementResponse.model_validate(record)
