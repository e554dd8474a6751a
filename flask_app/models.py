"""
Database models for Flask application.
"""
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime

from tzfield import UTC
from tzfield.sqltypes import TimeZoneType

db = SQLAlchemy()


class UserPreference(db.Model):
    """Per-user display preferences."""
    __tablename__ = 'user_preferences'

    id = db.Column(db.Integer, primary_key=True)
    user = db.Column(db.String(100), nullable=False, unique=True, index=True)
    timezone = db.Column(TimeZoneType(), nullable=False, default=UTC)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {'user': self.user, 'timezone': self.timezone}

    def __repr__(self):
        return f"<UserPreference user={self.user!r} tz={self.timezone}>"
