"""
Candidate <-> hiring process association model
"""
from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base


class CandidateProcess(Base):
    """Candidate taking part in a process, with evaluation notes"""

    __tablename__ = "candidate_process"

    id = Column(Integer, primary_key=True, index=True)

    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False, index=True)
    process_id = Column(Integer, ForeignKey("process.id"), nullable=False, index=True)

    # Evaluation fields
    technical_skills = Column(Text)
    soft_skills = Column(Text)
    client_comments = Column(Text)
    match_percent = Column(Integer)  # 0-100
    interview_questions = Column(Text)

    candidates = relationship("Candidate", back_populates="processes")
    process = relationship("Process", back_populates="candidate_processes")
