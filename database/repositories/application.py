import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from database.models import JobApplication
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


class ApplicationRepository(BaseRepository):
    def upsert(self, job_post_id: Any, job_applicant_id: Any, match_score: int) -> bool:
        """Insert an application unless one exists for the pair.

        Single statement keyed on the unique (job_post_id, job_applicant_id)
        constraint, so concurrent callers cannot both insert.

        Returns:
            True if a row was inserted, False if the pair already existed
        """
        dialect = self.db.get_bind().dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Atomic application upsert is not supported on {dialect}")

        stmt = insert(JobApplication).values(
            job_post_id=as_uuid(job_post_id),
            job_applicant_id=as_uuid(job_applicant_id),
            match_score=int(match_score),
        ).on_conflict_do_nothing(
            index_elements=['job_post_id', 'job_applicant_id']
        )
        result = self.db.execute(stmt)
        return result.rowcount == 1

    def find(self, job_post_id: Any, job_applicant_id: Any) -> Optional[JobApplication]:
        stmt = select(JobApplication).where(
            JobApplication.job_post_id == as_uuid(job_post_id),
            JobApplication.job_applicant_id == as_uuid(job_applicant_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_job(self, job_post_id: Any) -> List[JobApplication]:
        stmt = select(JobApplication).where(
            JobApplication.job_post_id == as_uuid(job_post_id)
        ).order_by(JobApplication.match_score.desc())
        return self.db.execute(stmt).scalars().all()
