import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Uuid, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType, utcnow


class JobPost(Base):
    """
    Job posting created by an employer.

    Only the fields the matching engine reads are modelled here; company and
    salary details live with the posting workflow.
    """
    __tablename__ = 'job_post'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_id = Column(Text, nullable=False, unique=True)  # public identifier used by callers

    job_role = Column(Text, nullable=False)
    job_description = Column(Text, nullable=False, default='')
    skills = Column(JSONType, nullable=False, default=list)  # list of skill strings

    experience = Column(Text, nullable=False)  # 0-1 | 2-4 | 5-7 | 8+ (optionally suffixed " years")
    job_location = Column(Text, nullable=False, default='remote')  # remote | onsite
    country = Column(Text)
    city = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    applications = relationship("JobApplication", back_populates="job_post", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_post_created', 'created_at'),
    )
