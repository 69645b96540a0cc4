import uuid

from sqlalchemy import Column, Integer, TIMESTAMP, Uuid, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class JobApplication(Base):
    """
    Application of a candidate to a job post, created by the matching engine.

    At most one row per (job_post_id, job_applicant_id); the unique constraint
    is the conflict target of the matching upsert.
    """
    __tablename__ = 'job_application'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_post_id = Column(Uuid, ForeignKey('job_post.id', ondelete='CASCADE'), nullable=False)
    job_applicant_id = Column(Uuid, ForeignKey('job_applicant.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Integer, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    job_post = relationship("JobPost", back_populates="applications")
    job_applicant = relationship("JobApplicant", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('job_post_id', 'job_applicant_id', name='uq_job_application_post_applicant'),
        Index('idx_job_application_applicant', 'job_applicant_id'),
        Index('idx_job_application_score', 'match_score'),
    )
