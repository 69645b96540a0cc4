import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from database.models import JobPost, JobApplicant, JobApplication
from database.repositories import (
    BaseRepository, JobPostRepository, ApplicantRepository, ApplicationRepository
)

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    """Facade over the per-table repositories used by the matching engine.

    All sub-repositories share one Session, so they take part in the same
    unit of work.
    """

    def __init__(self, db: Session):
        super().__init__(db)
        self.job_posts = JobPostRepository(db)
        self.applicants = ApplicantRepository(db)
        self.applications = ApplicationRepository(db)

    def get_posting(self, job_id: str) -> Optional[JobPost]:
        return self.job_posts.get_by_job_id(job_id)

    def get_all_candidates(self) -> List[JobApplicant]:
        return self.applicants.get_all()

    def upsert_application(self, job_post_id: Any, job_applicant_id: Any, match_score: int) -> bool:
        return self.applications.upsert(job_post_id, job_applicant_id, match_score)

    def find_application(self, job_post_id: Any, job_applicant_id: Any) -> Optional[JobApplication]:
        return self.applications.find(job_post_id, job_applicant_id)

    def get_applications_for_job(self, job_post_id: Any) -> List[JobApplication]:
        return self.applications.get_for_job(job_post_id)
