"""
Centralized Constants - SINGLE SOURCE OF TRUTH

Enumerations, storage keys and display limits used across the navigator.
DO NOT duplicate these definitions in other files.
"""

from enum import Enum


# =============================================================================
# SCHOOL ENUMERATIONS
# =============================================================================

class Curriculum(str, Enum):
    DSE = 'DSE'
    IB = 'IB'
    AP = 'AP'
    BRITISH = 'British (A-Level)'


class SchoolType(str, Enum):
    INTERNATIONAL = 'International'
    DSS = 'DSS (Direct Subsidy)'
    PRIVATE = 'Private'
    AIDED = 'Aided/Government'


class ProgressStatus(str, Enum):
    """Application funnel stages. Any stage may follow any other."""
    PLANNING = 'planning'
    APPLIED = 'applied'
    INTERVIEWING = 'interviewing'
    ACCEPTED = 'accepted'
    WAITLISTED = 'waitlisted'
    REJECTED = 'rejected'


class SortKey(str, Enum):
    RANK = 'rank'
    DEADLINE = 'deadline'


# Funnel display order
PROGRESS_ORDER = [status.value for status in ProgressStatus]

# Sentinel used by the front-end dropdowns for "no constraint"
FILTER_ALL = 'All'


# =============================================================================
# PERSISTED SLICE KEYS
# =============================================================================
# Each slice is stored and rewritten independently.

FOLLOWED_KEY = 'hk_followed_schools'
MONITORED_KEY = 'hk_monitored_schools'
PROGRESS_KEY = 'hk_school_progress'
NOTES_KEY = 'hk_school_notes'
CUSTOM_SCHOOLS_KEY = 'hk_custom_schools'

SLICE_KEYS = [FOLLOWED_KEY, MONITORED_KEY, PROGRESS_KEY, NOTES_KEY, CUSTOM_SCHOOLS_KEY]


# =============================================================================
# LIMITS
# =============================================================================

COMPARE_LIMIT = 3
NOTE_MAX_CHARS = 500

UPCOMING_DISPLAY_LIMIT = 5
INTERVIEW_DISPLAY_LIMIT = 2
DISTRICT_PREVIEW_LIMIT = 5
URGENT_DAYS = 7

# Catalog entries sent to the advisory model as context
ADVISORY_CONTEXT_SAMPLE = 10


# =============================================================================
# USER-FACING NOTICES
# =============================================================================

NOTICE_COMPARE_FULL = '最多只能同时对比 3 所学校。'
NOTICE_MONITOR_EMPTY = '请先标记需要监测的学校。'
NOTICE_LOOKUP_FAILED = '未能在官网找到详细信息，请手动填写。'
NOTICE_ADVISOR_BUSY = '上一个请求仍在处理中，请稍候。'

ADVISOR_FALLBACK = '抱歉，由于网络或 API 限制，目前无法为您提供回复。请检查您的网络连接或稍后再试。'

# Placeholders for custom schools added through the intake form
CUSTOM_INTERVIEW_REQUIREMENTS = '请完善面试要求信息'
CUSTOM_INTERVIEW_TIPS = '请完善面试建议信息'
