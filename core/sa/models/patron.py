# core/sa/models/patron.py
from sqlalchemy import Integer, String, CheckConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Patron(Base):
    __tablename__ = 'patrons'

    card_num: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    loans = relationship('CheckedOut', back_populates='patron')

    __table_args__ = (
        CheckConstraint('card_num >= 0', name='ck_patrons_card_num_unsigned'),
        Index('idx_patrons_name', 'name'),
    )
