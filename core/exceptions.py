#!/usr/bin/env python3
"""
Exceptions raised by the matching engine.
"""


class MatchingError(Exception):
    """Base exception for matching engine errors."""
    pass


class PostingNotFound(MatchingError):
    """Raised when a job posting identifier does not resolve."""

    def __init__(self, posting_id: str):
        self.posting_id = posting_id
        super().__init__(f"Job post not found: {posting_id}")


class CandidateDataError(MatchingError, ValueError):
    """Raised when a candidate resume cannot be scored (malformed dates, bad structure)."""
    pass
