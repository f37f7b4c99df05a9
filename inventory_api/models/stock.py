# inventory_api/models/stock.py
from sqlalchemy import Column, Integer, String, DateTime
from inventory_api.database import Base

class StockHistory(Base):
    __tablename__ = "stock_history"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True)

    # No foreign key: history outlives the product it describes
    product_id = Column(String(36), nullable=False, index=True)
    # Name as it was when the change happened
    product_name = Column(String, nullable=False)

    previous_quantity = Column(Integer, nullable=False)
    new_quantity = Column(Integer, nullable=False)
    change_amount = Column(Integer, nullable=False)
    # Movement classification (increase, decrease, set)
    change_type = Column(String(20), nullable=False, index=True)

    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    notes = Column(String, nullable=True)
    user_id = Column(String(36), nullable=True)
