"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class GipitException(Exception):
    """Base exception for the candidates API"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(GipitException):
    """Bad or missing input"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(GipitException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404)


class InternalError(GipitException):
    """Store fault or unexpected failure; the message sent to clients stays opaque"""

    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class CandidateBatchError(InternalError):
    """A candidate batch addition was aborted and rolled back"""

    def __init__(self, candidate_id: int):
        super().__init__(
            f"Candidate with ID {candidate_id} not found",
            details={"candidate_id": candidate_id, "rolled_back": True},
        )
