import logging
from typing import Optional

from sqlalchemy import select

from database.models import JobPost
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobPostRepository(BaseRepository):
    def get_by_job_id(self, job_id: str) -> Optional[JobPost]:
        stmt = select(JobPost).where(JobPost.job_id == job_id)
        return self.db.execute(stmt).scalar_one_or_none()
