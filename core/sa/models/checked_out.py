# core/sa/models/checked_out.py
from sqlalchemy import Integer, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class CheckedOut(Base):
    """A loan of one copy to one patron.

    The serial is the primary key, so a copy can only be on loan once.
    """
    __tablename__ = 'checked_out'

    serial: Mapped[int] = mapped_column(
        Integer, ForeignKey('inventory.serial'), primary_key=True, autoincrement=False
    )
    card_num: Mapped[int] = mapped_column(Integer, ForeignKey('patrons.card_num'), nullable=False)

    # Relationships
    copy = relationship('InventoryItem', back_populates='loan')
    patron = relationship('Patron', back_populates='loans')

    __table_args__ = (
        Index('idx_checked_out_card_num', 'card_num'),
    )
