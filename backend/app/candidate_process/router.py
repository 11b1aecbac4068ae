"""
Candidate process routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.validators import parse_positive_int
from app.candidate_process.schemas import (
    CandidateProcessUpdate,
    CandidateProcessResponse,
    CandidateProcessDetailResponse,
    CandidateProcessUpdateResponse,
    MessageResponse,
)
from app.candidate_process.service import candidate_process_service

router = APIRouter(prefix="/api/candidate_process", tags=["Candidate Process"])


@router.get("/{association_id}", response_model=List[CandidateProcessDetailResponse])
def list_candidate_processes(
    association_id: str,
    process_id: Optional[str] = Query(None, description="Process whose candidates to list"),
    db: Session = Depends(get_db),
):
    """List a process's candidate associations (filtered by process_id, not the path id)"""
    pid = parse_positive_int(
        process_id, "process_id", message="Invalid or missing process_id query parameter"
    )
    associations = candidate_process_service.list_for_process(db, pid)
    return [CandidateProcessDetailResponse.model_validate(a) for a in associations]


@router.put(
    "/{association_id}",
    response_model=CandidateProcessUpdateResponse,
    response_model_exclude_unset=True,
)
def update_candidate_process(
    association_id: int,
    changes: CandidateProcessUpdate,
    db: Session = Depends(get_db),
):
    """Update an association's evaluation and optionally add candidates"""
    association, added = candidate_process_service.update(db, association_id, changes)
    updated = CandidateProcessResponse.model_validate(association)

    if added is None:
        return CandidateProcessUpdateResponse(
            message="Candidate-Process updated successfully",
            updated_candidate_process=updated,
        )
    return CandidateProcessUpdateResponse(
        message="Candidate-Process updated and candidates added successfully",
        updated_candidate_process=updated,
        added_candidates=[CandidateProcessResponse.model_validate(a) for a in added],
    )


@router.delete("/{association_id}", response_model=MessageResponse)
def delete_candidate_process(association_id: int, db: Session = Depends(get_db)):
    """Delete an association"""
    candidate_process_service.delete(db, association_id)
    return MessageResponse(message="Candidate-Process association deleted successfully")
