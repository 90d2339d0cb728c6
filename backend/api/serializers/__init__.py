"""
Response serializers and envelope helpers.
"""

from .response import outcome_envelope, success_envelope
from .school import (
    comparison_matrix,
    serialize_card,
    serialize_cards,
    serialize_dashboard,
    serialize_districts,
    serialize_state,
)

__all__ = [
    'success_envelope',
    'outcome_envelope',
    'comparison_matrix',
    'serialize_card',
    'serialize_cards',
    'serialize_dashboard',
    'serialize_districts',
    'serialize_state',
]
