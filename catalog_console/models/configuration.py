"""Key/value platform configuration."""

from datetime import datetime
from catalog_console import db


class Configuration(db.Model):
    """Platform-wide setting stored as text (PS_LANG_DEFAULT, PS_HOME_CATEGORY, ...)."""

    __tablename__ = 'configuration'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(254), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @classmethod
    def set(cls, name, value):
        """Create or update a key. Caller commits."""
        row = cls.query.filter_by(name=name).first()
        if row is None:
            row = cls(name=name)
            db.session.add(row)
        row.value = None if value is None else str(value)
        return row

    def __repr__(self):
        return f'<Configuration {self.name}={self.value}>'
