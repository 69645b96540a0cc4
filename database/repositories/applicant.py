from typing import List

from sqlalchemy import select

from database.models import JobApplicant
from database.repositories.base import BaseRepository


class ApplicantRepository(BaseRepository):
    def get_all(self) -> List[JobApplicant]:
        """All applicants in a stable order (oldest first)."""
        stmt = select(JobApplicant).order_by(JobApplicant.created_at, JobApplicant.id)
        return self.db.execute(stmt).scalars().all()
