# core/sa/models/title.py
from sqlalchemy import String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Title(Base):
    """A bibliographic record, independent of any physical copy."""
    __tablename__ = 'titles'

    isbn: Mapped[str] = mapped_column(String(20), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    copies = relationship('InventoryItem', back_populates='title')

    __table_args__ = (
        Index('idx_titles_title', 'title'),
    )
