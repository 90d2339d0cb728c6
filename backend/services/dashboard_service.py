"""
Dashboard Service - Deadline countdowns and application funnel

Derives the tracking dashboard from the followed schools and the progress
map. All functions are pure and recomputed on every request; `today` is
always passed in so results are deterministic.

Panels:
- upcoming: followed schools whose deadline is today or later, soonest
  first, top UPCOMING_DISPLAY_LIMIT shown plus the total for an overflow
  indicator. A deadline of today has 0 days remaining and is included.
- funnel: followed schools per progress status with proportions of the
  followed total. An empty followed set gives all-zero proportions.
- interviewing: followed schools currently interviewing.

Usage:
    from services.dashboard_service import build_dashboard

    result = build_dashboard(followed=catalog.resolve(state.followed_ids),
                             progress=state.progress,
                             today=date.today())
"""

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Sequence

from constants import (
    INTERVIEW_DISPLAY_LIMIT,
    PROGRESS_ORDER,
    UPCOMING_DISPLAY_LIMIT,
    URGENT_DAYS,
    ProgressStatus,
)
from models.school import School

logger = logging.getLogger(__name__)


def days_remaining(school: School, today: date) -> int:
    """Whole days from today until the application deadline."""
    return (school.deadline - today).days


def upcoming_deadlines(
    followed: Sequence[School],
    today: date,
    limit: int = UPCOMING_DISPLAY_LIMIT,
) -> Dict[str, Any]:
    upcoming = sorted(
        (s for s in followed if days_remaining(s, today) >= 0),
        key=lambda s: s.deadline,
    )
    shown = upcoming[:limit]

    return {
        'entries': [
            {
                'school': school,
                'daysRemaining': days_remaining(school, today),
                'urgent': days_remaining(school, today) < URGENT_DAYS,
                'interviewDate': school.interview_date,
            }
            for school in shown
        ],
        'total': len(upcoming),
        'shown': len(shown),
        'overflow': len(upcoming) - len(shown),
    }


def _status_of(school: School, progress: Mapping[str, ProgressStatus]) -> ProgressStatus:
    # A followed school always has a status; planning is the first-follow default
    return ProgressStatus(progress.get(school.id, ProgressStatus.PLANNING))


def progress_funnel(
    followed: Sequence[School],
    progress: Mapping[str, ProgressStatus],
) -> Dict[str, Any]:
    counts = {status: 0 for status in PROGRESS_ORDER}
    for school in followed:
        counts[_status_of(school, progress).value] += 1

    total = len(followed)
    stages = [
        {
            'status': status,
            'count': counts[status],
            'proportion': counts[status] / total if total else 0.0,
        }
        for status in PROGRESS_ORDER
    ]
    return {'total': total, 'stages': stages}


def interview_stage(
    followed: Sequence[School],
    progress: Mapping[str, ProgressStatus],
    limit: int = INTERVIEW_DISPLAY_LIMIT,
) -> Dict[str, Any]:
    interviewing = [
        s for s in followed if _status_of(s, progress) == ProgressStatus.INTERVIEWING
    ]
    return {
        'schools': interviewing[:limit],
        'total': len(interviewing),
    }


def build_dashboard(
    followed: Sequence[School],
    progress: Mapping[str, ProgressStatus],
    today: date,
) -> Dict[str, Any]:
    """All dashboard panels in one payload."""
    followed = list(followed)
    result = {
        'trackedCount': len(followed),
        'isEmpty': not followed,
        'upcoming': upcoming_deadlines(followed, today),
        'funnel': progress_funnel(followed, progress),
        'interviewing': interview_stage(followed, progress),
        'asOf': today.isoformat(),
    }
    logger.debug(
        f"Dashboard built: tracked={result['trackedCount']} "
        f"upcoming={result['upcoming']['total']}"
    )
    return result
