"""
Candidate management dependencies
"""
from fastapi import Request

from app.candidate_management.lifecycle import DisengagementScheduler


def get_disengagement_scheduler(request: Request) -> DisengagementScheduler:
    """Scheduler owned by the running application"""
    return request.app.state.disengagement_scheduler
