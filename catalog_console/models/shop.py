"""Shop and language models for the storefront setup."""

from catalog_console import db


class Shop(db.Model):
    """Storefront (tenant). More than one row means a multi-shop install."""

    __tablename__ = 'shops'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    def __repr__(self):
        return f'<Shop {self.id}: {self.name}>'


class Language(db.Model):
    """Language a category name can be translated into."""

    __tablename__ = 'languages'

    id = db.Column(db.Integer, primary_key=True)
    iso_code = db.Column(db.String(2), unique=True, nullable=False)  # e.g., 'en'
    name = db.Column(db.String(32), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    def __repr__(self):
        return f'<Language {self.id}: {self.iso_code}>'
