#!/usr/bin/env python3
"""
Experience Match - Candidate's total years against the posting's experience bucket.

Buckets are closed ranges of years:
    0-1 -> [0, 1], 2-4 -> [2, 4], 5-7 -> [5, 7], 8+ -> [8, inf)

Entries are summed without overlap detection, so concurrent roles count twice.
Each entry runs from the first day of its start month to the first day of its
end month, or to the evaluation instant when it is ongoing. Years use a
365-day approximation.
"""

import logging
import math
from datetime import datetime
from typing import Dict, Iterable, Optional, Sequence, Tuple

from core.exceptions import CandidateDataError
from core.matcher.models import ExperienceEntry

logger = logging.getLogger(__name__)

EXPERIENCE_RANGES: Dict[str, Tuple[float, float]] = {
    '0-1': (0.0, 1.0),
    '2-4': (2.0, 4.0),
    '5-7': (5.0, 7.0),
    '8+': (8.0, math.inf),
}

SECONDS_PER_YEAR = 60 * 60 * 24 * 365

PERFECT_MATCH_SCORE = 100.0
OVERQUALIFIED_SCORE = 80.0

_DATE_FORMATS = ('%m/%Y', '%Y-%m')


def parse_bucket(label: str) -> Optional[Tuple[float, float]]:
    """Resolve '2-4' or the long form '2-4 years' to its year range."""
    if not label:
        return None
    key = label.strip().lower()
    if key.endswith('years'):
        key = key[:-len('years')].strip()
    return EXPERIENCE_RANGES.get(key)


def parse_month(value: Optional[str]) -> datetime:
    """Parse MM/YYYY (or YYYY-MM) into the first instant of that month."""
    if not isinstance(value, str) or not value.strip():
        raise CandidateDataError(f"Missing experience date: {value!r}")
    text = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise CandidateDataError(f"Malformed experience date: {value!r}")


def entry_years(entry: ExperienceEntry, now: datetime) -> float:
    start = parse_month(entry.start_date)
    end = now if entry.is_ongoing else parse_month(entry.end_date)
    return (end - start).total_seconds() / SECONDS_PER_YEAR


def calculate_total_years(experience: Iterable[ExperienceEntry], now: datetime) -> float:
    """Sum the duration of every entry in fractional years."""
    return sum(entry_years(entry, now) for entry in experience)


def calculate_experience_match(
    required_experience: str,
    candidate_experience: Sequence[ExperienceEntry],
    now: datetime
) -> float:
    """
    Score the candidate's experience against the required bucket.

    Args:
        required_experience: Bucket label ('0-1', '2-4', '5-7', '8+')
        candidate_experience: Candidate's experience entries
        now: Evaluation instant used to close ongoing entries

    Returns:
        100 within range, 80 above it, linear partial credit below it;
        0.0 when the bucket or the experience list is empty or unknown

    Raises:
        CandidateDataError: an entry has a missing or malformed date
    """
    if not required_experience or not candidate_experience:
        return 0.0

    required = parse_bucket(required_experience)
    if required is None:
        logger.warning(f"Unknown experience bucket {required_experience!r}")
        return 0.0

    low, high = required
    total_years = calculate_total_years(candidate_experience, now)

    if low <= total_years <= high:
        return PERFECT_MATCH_SCORE
    if total_years > high:
        return OVERQUALIFIED_SCORE
    # Negative totals (end before start) get no credit.
    if total_years <= 0 or low <= 0:
        return 0.0
    return total_years / low * 100.0
