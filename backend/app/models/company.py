"""
Company and engagement (management) models
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    """Client company"""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    managements = relationship("Management", back_populates="company")
    processes = relationship("Process", back_populates="company")


class Management(Base):
    """An engagement: a company's contractual context for placed candidates"""

    __tablename__ = "management"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    name = Column(String(255))

    company = relationship("Company", back_populates="managements")
    candidate_managements = relationship("CandidateManagement", back_populates="management")
