"""
Shared SQLAlchemy handle.

Bound to the Flask app in app.create_app() via db.init_app(app).
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
