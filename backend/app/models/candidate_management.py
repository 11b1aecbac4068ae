"""
Candidate management (engagement assignment) model
"""
import enum

from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.core.database import Base


class EngagementStatus(str, enum.Enum):
    """Status of a candidate inside an engagement"""

    ACTIVE = "active"
    DISENGAGED = "disengaged"


class CandidateManagement(Base):
    """Assignment of a candidate to an engagement with a rate and position"""

    __tablename__ = "candidate_management"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign keys
    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False, index=True)
    management_id = Column(Integer, ForeignKey("management.id"), nullable=False, index=True)

    # Derived; see app.candidate_management.lifecycle
    status = Column(String(20), nullable=False, default=EngagementStatus.ACTIVE.value)

    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True))

    position = Column(String(255), nullable=False)
    rate = Column(Float, nullable=False)  # hourly

    # Relationships
    candidates = relationship("Candidate", back_populates="managements")
    management = relationship("Management", back_populates="candidate_managements")

    # The reconciliation sweep scans by status and end date
    __table_args__ = (
        Index("idx_candidate_management_status_end", "status", "end_date"),
    )
