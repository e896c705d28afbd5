from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from core.sa.models import InventoryItem

# Serials are stored as unsigned 32-bit values
MAX_SERIAL = 2**32 - 1

class InventoryRepository:
    """Repository for managing physical copies."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_serial(self, serial: int) -> Optional[InventoryItem]:
        return (
            self.session.query(InventoryItem)
            .options(joinedload(InventoryItem.title))
            .filter(InventoryItem.serial == serial)
            .first()
        )

    def get_by_isbn(self, isbn: str) -> List[InventoryItem]:
        """Get all copies of a title, ordered by serial."""
        return (
            self.session.query(InventoryItem)
            .filter(InventoryItem.isbn == isbn)
            .order_by(InventoryItem.serial)
            .all()
        )

    def add_copy(self, serial: int, isbn: str) -> InventoryItem:
        """Register a new physical copy.

        Args:
            serial: The serial number of the copy
            isbn: The ISBN of the title it belongs to

        Returns:
            The created InventoryItem object
        """
        item = InventoryItem(serial=serial, isbn=isbn)
        self.session.add(item)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return item
