import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Uuid, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType, utcnow


class JobApplicant(Base):
    """
    Candidate account with the resume used for matching.

    The resume is stored as a JSON document:
        personal: {firstName, lastName, email, country?, city?}
        skills: [{name}]
        professionalSummary: str
        experience: [{role, description, startDate: "MM/YYYY", endDate: "MM/YYYY" | "Present"}]
        education: [{degree}]
    """
    __tablename__ = 'job_applicant'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False, unique=True)
    resume = Column(JSONType, nullable=False, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    applications = relationship("JobApplication", back_populates="job_applicant", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_applicant_created', 'created_at'),
    )
