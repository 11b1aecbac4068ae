"""
Candidate process Pydantic schemas
"""
from typing import Optional, List
from pydantic import BaseModel, Field
from datetime import datetime


class CandidateProcessUpdate(BaseModel):
    """Evaluation update; fields left out of the body are not touched"""
    technical_skills: Optional[str] = None
    soft_skills: Optional[str] = None
    client_comments: Optional[str] = None
    match_percent: Optional[int] = None
    interview_questions: Optional[str] = None
    candidate_ids: Optional[List[int]] = Field(
        default=None, description="Candidates to add to the same process"
    )


class CandidateBrief(BaseModel):
    id: int
    name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class ProcessBrief(BaseModel):
    id: int
    company_id: Optional[int] = None
    job_offer: Optional[str] = None
    job_offer_description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CandidateProcessResponse(BaseModel):
    """Candidate-process association"""
    id: int
    candidate_id: int
    process_id: int
    technical_skills: Optional[str] = None
    soft_skills: Optional[str] = None
    client_comments: Optional[str] = None
    match_percent: Optional[int] = None
    interview_questions: Optional[str] = None

    class Config:
        from_attributes = True


class CandidateProcessDetailResponse(CandidateProcessResponse):
    """Association with candidate and process joined in"""
    candidates: Optional[CandidateBrief] = None
    process: Optional[ProcessBrief] = None


class CandidateProcessUpdateResponse(BaseModel):
    message: str
    updated_candidate_process: CandidateProcessResponse
    added_candidates: Optional[List[CandidateProcessResponse]] = None


class MessageResponse(BaseModel):
    message: str
