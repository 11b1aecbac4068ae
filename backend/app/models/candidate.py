"""
Candidate model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Candidate(Base):
    """Candidate owned by the recruiting side; referenced, never mutated here"""

    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, index=True)

    # Personal information
    name = Column(String(100), nullable=False)
    last_name = Column(String(100))
    email = Column(String(255), index=True)
    phone = Column(String(50))
    address = Column(String(255))

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    managements = relationship("CandidateManagement", back_populates="candidates")
    processes = relationship("CandidateProcess", back_populates="candidates")
