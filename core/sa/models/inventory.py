# core/sa/models/inventory.py
from sqlalchemy import Integer, String, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class InventoryItem(Base):
    """One physical, serially numbered copy of a title."""
    __tablename__ = 'inventory'

    serial: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    isbn: Mapped[str] = mapped_column(String(20), ForeignKey('titles.isbn'), nullable=False)

    # Relationships
    title = relationship('Title', back_populates='copies')
    loan = relationship('CheckedOut', back_populates='copy', uselist=False)

    __table_args__ = (
        CheckConstraint('serial >= 0', name='ck_inventory_serial_unsigned'),
        Index('idx_inventory_isbn', 'isbn'),
    )
