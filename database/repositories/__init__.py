from database.repositories.base import BaseRepository
from database.repositories.job_post import JobPostRepository
from database.repositories.applicant import ApplicantRepository
from database.repositories.application import ApplicationRepository

__all__ = [
    'BaseRepository',
    'JobPostRepository',
    'ApplicantRepository',
    'ApplicationRepository',
]
