"""
Database models
"""
from app.models.company import Company, Management
from app.models.candidate import Candidate
from app.models.process import Process
from app.models.candidate_management import CandidateManagement, EngagementStatus
from app.models.candidate_process import CandidateProcess

__all__ = [
    "Company",
    "Management",
    "Candidate",
    "Process",
    "CandidateManagement",
    "EngagementStatus",
    "CandidateProcess",
]
