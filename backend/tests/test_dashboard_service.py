"""
Unit tests for services/dashboard_service.py
"""

from datetime import date

import pytest

from constants import PROGRESS_ORDER, ProgressStatus
from services.dashboard_service import (
    build_dashboard,
    days_remaining,
    interview_stage,
    progress_funnel,
    upcoming_deadlines,
)

TODAY = date(2024, 10, 1)


@pytest.fixture
def followed(make_school):
    return [
        make_school(id="today", application_end="2024-10-01"),
        make_school(id="yesterday", application_end="2024-09-30"),
        make_school(id="soon", application_end="2024-10-05"),
        make_school(id="later", application_end="2024-12-01"),
    ]


class TestUpcomingDeadlines:
    """upcoming_deadlines()"""

    def test_deadline_today_included_with_zero_days(self, followed):
        result = upcoming_deadlines(followed, TODAY)
        entries = {e['school'].id: e for e in result['entries']}
        assert entries['today']['daysRemaining'] == 0

    def test_past_deadline_excluded(self, followed):
        result = upcoming_deadlines(followed, TODAY)
        assert 'yesterday' not in [e['school'].id for e in result['entries']]
        assert result['total'] == 3

    def test_ascending_by_deadline(self, followed):
        result = upcoming_deadlines(followed, TODAY)
        assert [e['school'].id for e in result['entries']] == ['today', 'soon', 'later']

    def test_urgent_flag(self, followed):
        entries = {e['school'].id: e for e in upcoming_deadlines(followed, TODAY)['entries']}
        assert entries['soon']['urgent'] is True
        assert entries['later']['urgent'] is False

    def test_display_limit(self, make_school):
        many = [
            make_school(id=f"s{i}", application_end=f"2024-11-{i + 1:02d}") for i in range(8)
        ]
        result = upcoming_deadlines(many, TODAY)
        assert result['shown'] == 5
        assert result['total'] == 8
        assert result['overflow'] == 3
        assert [e['school'].id for e in result['entries']] == ['s0', 's1', 's2', 's3', 's4']

    def test_days_remaining(self, make_school):
        assert days_remaining(make_school(application_end="2024-10-11"), TODAY) == 10


class TestProgressFunnel:
    """progress_funnel()"""

    def test_proportions_sum_to_one(self, followed):
        progress = {
            'today': ProgressStatus.APPLIED,
            'soon': ProgressStatus.INTERVIEWING,
            'later': ProgressStatus.ACCEPTED,
        }
        funnel = progress_funnel(followed, progress)
        assert funnel['total'] == 4
        assert sum(s['proportion'] for s in funnel['stages']) == pytest.approx(1.0)

    def test_stage_order_fixed(self, followed):
        funnel = progress_funnel(followed, {})
        assert [s['status'] for s in funnel['stages']] == PROGRESS_ORDER

    def test_missing_entry_counts_as_planning(self, followed):
        funnel = progress_funnel(followed, {})
        planning = funnel['stages'][0]
        assert planning['status'] == 'planning'
        assert planning['count'] == 4
        assert planning['proportion'] == 1.0

    def test_empty_followed_all_zero(self):
        funnel = progress_funnel([], {'dbs': ProgressStatus.APPLIED})
        assert funnel['total'] == 0
        assert all(s['count'] == 0 and s['proportion'] == 0 for s in funnel['stages'])


class TestInterviewStage:
    """interview_stage()"""

    def test_first_two_shown(self, followed):
        progress = {s.id: ProgressStatus.INTERVIEWING for s in followed}
        result = interview_stage(followed, progress)
        assert result['total'] == 4
        assert [s.id for s in result['schools']] == ['today', 'yesterday']

    def test_none_interviewing(self, followed):
        assert interview_stage(followed, {}) == {'schools': [], 'total': 0}


class TestBuildDashboard:
    """build_dashboard()"""

    def test_empty(self):
        dashboard = build_dashboard([], {}, TODAY)
        assert dashboard['isEmpty'] is True
        assert dashboard['trackedCount'] == 0
        assert dashboard['upcoming']['entries'] == []
        assert dashboard['asOf'] == '2024-10-01'

    def test_bundles_panels(self, followed):
        dashboard = build_dashboard(followed, {'soon': ProgressStatus.INTERVIEWING}, TODAY)
        assert dashboard['isEmpty'] is False
        assert dashboard['trackedCount'] == 4
        assert dashboard['upcoming']['total'] == 3
        assert dashboard['interviewing']['total'] == 1
        assert dashboard['funnel']['total'] == 4
