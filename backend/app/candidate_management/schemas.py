"""
Candidate management Pydantic schemas
"""
from typing import Any, Optional
from pydantic import BaseModel
from datetime import datetime


class CandidateManagementCreate(BaseModel):
    """Creation payload; required fields are checked by the service so they map to 400"""
    candidate_id: Optional[int] = None
    management_id: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    position: Optional[str] = None
    rate: Optional[Any] = None  # number or numeric string; checked by parse_rate


class CandidateSummary(BaseModel):
    """Candidate data embedded in engagement listings"""
    id: int
    name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class CandidateManagementResponse(BaseModel):
    """Candidate management record"""
    id: int
    candidate_id: int
    management_id: int
    status: str
    start_date: datetime
    end_date: Optional[datetime] = None
    position: str
    rate: float

    class Config:
        from_attributes = True


class CandidateManagementDetailResponse(CandidateManagementResponse):
    """Record with its candidate joined in"""
    candidates: Optional[CandidateSummary] = None
