from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
from core.sa.models import Title, InventoryItem, CheckedOut

class CheckoutRepository:
    """Repository for loans (rows of the checked_out table)."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_loan(self, serial: int, card_num: int) -> Optional[CheckedOut]:
        """Get the loan of a copy to a specific patron.

        Args:
            serial: The serial number of the copy
            card_num: The borrowing patron's card number

        Returns:
            The CheckedOut object if that patron holds the copy, None otherwise
        """
        return (
            self.session.query(CheckedOut)
            .filter(
                CheckedOut.serial == serial,
                CheckedOut.card_num == card_num
            )
            .first()
        )

    def get_by_serial(self, serial: int) -> Optional[CheckedOut]:
        return self.session.query(CheckedOut).filter(CheckedOut.serial == serial).first()

    def list_for_card(self, card_num: int) -> List[Dict[str, Any]]:
        """List the copies a patron currently has checked out.

        Args:
            card_num: The borrowing patron's card number

        Returns:
            List of dicts with title, author and serial
        """
        rows = (
            self.session.query(Title.title, Title.author, InventoryItem.serial)
            .join(InventoryItem, InventoryItem.isbn == Title.isbn)
            .join(CheckedOut, CheckedOut.serial == InventoryItem.serial)
            .filter(CheckedOut.card_num == card_num)
            .order_by(InventoryItem.serial)
            .all()
        )

        return [
            {
                "title": row.title,
                "author": row.author,
                "serial": row.serial
            }
            for row in rows
        ]

    def check_out(self, serial: int, card_num: int) -> CheckedOut:
        """Record a loan of a copy to a patron.

        The copy is assumed to be available. A second loan of the same serial
        violates the primary key and the IntegrityError propagates after the
        session is rolled back.

        Args:
            serial: The serial number of the copy
            card_num: The borrowing patron's card number

        Returns:
            The created CheckedOut object
        """
        loan = CheckedOut(serial=serial, card_num=card_num)
        self.session.add(loan)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return loan

    def return_copy(self, serial: int, card_num: int) -> bool:
        """Delete the loan of a copy held by a patron.

        Args:
            serial: The serial number of the copy
            card_num: The borrowing patron's card number

        Returns:
            True if a loan was deleted, False if the patron did not hold the copy
        """
        loan = self.get_loan(serial, card_num)
        if not loan:
            return False

        self.session.delete(loan)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True
