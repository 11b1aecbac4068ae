"""
Hiring process model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Process(Base):
    """Hiring pipeline instance candidates are evaluated in"""

    __tablename__ = "process"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), index=True)

    job_offer = Column(String(255))
    job_offer_description = Column(Text)
    status = Column(String(50), default="open")

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    company = relationship("Company", back_populates="processes")
    candidate_processes = relationship("CandidateProcess", back_populates="process")
