"""
Stored Slice Model - Local key-value store for per-user overlays

One row per persisted slice (followed ids, monitored ids, progress map,
notes map, custom schools). The value column holds the JSON encoding of
the whole slice and is overwritten on every mutation.

Fields:
- key: slice name, primary key (see constants.SLICE_KEYS)
- value: JSON text
- updated_at: last full rewrite
"""
from models.database import db
from datetime import datetime


class StoredSlice(db.Model):
    __tablename__ = 'stored_slices'

    key = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<StoredSlice {self.key}>"
