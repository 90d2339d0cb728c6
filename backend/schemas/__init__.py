# Request and lookup schemas
from .base import BaseParamsModel
from .filters import FilterParams
from .school import LookupResult, SchoolDraft

__all__ = [
    'BaseParamsModel',
    'FilterParams',
    'LookupResult',
    'SchoolDraft',
]
