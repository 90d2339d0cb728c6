"""
Models package - catalog record and SQLAlchemy models
"""
from models.database import db
from models.school import School
from models.stored_slice import StoredSlice

__all__ = [
    'db',
    'School',
    'StoredSlice',
]
