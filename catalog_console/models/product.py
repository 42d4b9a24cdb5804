"""Product model for the catalog."""

from datetime import datetime
from catalog_console import db


class Product(db.Model):
    """Sellable product; only its active flag and category links matter here."""

    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    reference = db.Column(db.String(64), nullable=True, index=True)
    name = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<Product {self.id}: {self.name}>'
