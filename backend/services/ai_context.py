"""
AI Context Assembly

Builds the short natural-language digest sent with every advisory
question. Only the first ADVISORY_CONTEXT_SAMPLE catalog entries are
named; the rest of the catalog is summarized by its size so the outbound
payload stays small no matter how many custom schools are added.
"""

import logging
from typing import Iterable

from constants import ADVISORY_CONTEXT_SAMPLE
from models.school import School

logger = logging.getLogger(__name__)

TOPIC_HINT = "Topics: Ranking, Application Deadlines, Interview Tips, DSE vs IB track."
STYLE_HINT = "Be polite, expert, and use a mix of Chinese and English."


def build_advisory_context(
    schools: Iterable[School],
    sample_size: int = ADVISORY_CONTEXT_SAMPLE,
) -> str:
    schools = list(schools)
    sample = schools[:sample_size]
    names = ", ".join(f"{s.name} ({s.name_zh})" for s in sample)

    context = "\n".join([
        f"Current School Database has {len(schools)} top HK primary schools including: "
        f"{names} and many others.",
        TOPIC_HINT,
        STYLE_HINT,
    ])
    logger.debug(f"Advisory context built from {len(sample)} of {len(schools)} schools")
    return context


def build_monitor_prompt(school_names: Iterable[str]) -> str:
    names = "\n".join(f"- {name}" for name in school_names)
    return (
        "Check the latest 2024/2025 admissions news for these Hong Kong primary schools. "
        "For each school give one short line on application dates, open days or "
        "interview arrangements that changed recently, or say nothing new was found.\n"
        f"{names}"
    )


LOOKUP_FIELDS = (
    "name", "nameZh", "location", "district", "tuitionFee", "curriculum",
    "language", "type", "applicationStart", "applicationEnd", "interviewDate",
    "website", "description",
)


def build_lookup_prompt(school_name: str) -> str:
    fields = ", ".join(LOOKUP_FIELDS)
    return (
        f"Find the official admissions details of the Hong Kong primary school "
        f"\"{school_name}\". Reply with a single JSON object and nothing else, "
        f"using only these keys: {fields}. "
        "curriculum is a list drawn from [\"DSE\", \"IB\", \"AP\", \"British (A-Level)\"]; "
        "type is one of \"International\", \"DSS (Direct Subsidy)\", \"Private\", "
        "\"Aided/Government\"; dates use YYYY-MM-DD; district uses the form "
        "\"Kowloon City (九龍城區)\". Omit any key you cannot verify."
    )
