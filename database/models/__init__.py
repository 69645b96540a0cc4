from .base import Base
from .job import JobPost
from .applicant import JobApplicant
from .application import JobApplication

__all__ = [
    'Base',
    'JobPost',
    'JobApplicant',
    'JobApplication',
]
