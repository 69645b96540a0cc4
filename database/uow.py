import contextlib
import logging
from typing import Callable, Iterator, Optional

from sqlalchemy.orm import Session

from database.database import new_session
from database.repository import JobRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def job_uow(session_factory: Optional[Callable[[], Session]] = None) -> Iterator[JobRepository]:
    """Transaction scope for one unit of matching work.

    The yielded JobRepository owns a new Session. Leaving the block normally
    commits; an exception rolls back and is re-raised. The session is closed
    either way.

    Usage:
        with job_uow() as repo:
            created = repo.upsert_application(job_post_id, applicant_id, score)

    Args:
        session_factory: Callable returning a Session; defaults to the
            engine-bound SessionLocal (tests pass a sessionmaker bound to SQLite)
    """
    session = (session_factory or new_session)()
    try:
        yield JobRepository(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
