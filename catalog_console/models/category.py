"""Category models for the product catalog tree."""

from datetime import datetime
from catalog_console import db


# Association table between categories and the products they contain
category_products = db.Table(
    'category_products',
    db.Column('category_id', db.Integer, db.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True),
    db.Column('product_id', db.Integer, db.ForeignKey('products.id', ondelete='CASCADE'), primary_key=True),
    db.Column('position', db.Integer, default=0, nullable=False),
)


class Category(db.Model):
    """Category node - the tree is built through parent_id."""

    __tablename__ = 'categories'

    id = db.Column(db.Integer, primary_key=True)
    parent_id = db.Column(db.Integer, db.ForeignKey('categories.id'), nullable=True, index=True)
    level_depth = db.Column(db.Integer, default=0, nullable=False)
    position = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    children = db.relationship('Category', backref=db.backref('parent', remote_side=[id]), lazy='dynamic')
    translations = db.relationship('CategoryTranslation', backref='category', lazy='dynamic', cascade='all, delete-orphan')
    products = db.relationship('Product', secondary=category_products, backref=db.backref('categories', lazy='dynamic'), lazy='dynamic')

    def __repr__(self):
        return f'<Category {self.id} parent={self.parent_id}>'


class CategoryTranslation(db.Model):
    """Per-language category name."""

    __tablename__ = 'category_translations'

    category_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True)
    language_id = db.Column(db.Integer, db.ForeignKey('languages.id', ondelete='CASCADE'), primary_key=True)
    name = db.Column(db.String(128), nullable=False)

    def __repr__(self):
        return f'<CategoryTranslation {self.category_id}/{self.language_id}: {self.name}>'
