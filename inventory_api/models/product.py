# inventory_api/models/product.py
from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint
from inventory_api.database import Base

# Represents a single inventory item.
# `seq` only orders rows by insertion (newest first in listings),
# the public identifier is the opaque `id`.
class Product(Base):
    __tablename__ = "products"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True)

    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)
    # Uniqueness is case-insensitive and checked by the service layer
    sku = Column(String, nullable=False, index=True)
    supplier = Column(String, nullable=False)

    quantity = Column(Integer, CheckConstraint("quantity >= 0"), nullable=False)
    price = Column(Float, CheckConstraint("price >= 0"), nullable=False)
    min_stock = Column(Integer, CheckConstraint("min_stock >= 0"), nullable=True)

    notes = Column(String, nullable=True)
    image = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
