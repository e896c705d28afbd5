from typing import Optional
from sqlalchemy.orm import Session
from core.sa.models import Patron

# Card numbers are stored as unsigned 32-bit values
MAX_CARD_NUM = 2**32 - 1

class PatronRepository:
    """Repository for managing Patron entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_card_num(self, card_num: int) -> Optional[Patron]:
        """Get a patron by card number.

        Args:
            card_num: The library card number

        Returns:
            The Patron object if found, None otherwise
        """
        return self.session.query(Patron).filter(Patron.card_num == card_num).first()

    def find_by_credentials(self, name: str, card_num: int) -> Optional[Patron]:
        """Find the patron whose name and card number both match exactly.

        A card number outside the unsigned range cannot match any row, so no
        query is issued for it.

        Args:
            name: The patron's name
            card_num: The patron's card number

        Returns:
            The matching Patron if any, None otherwise
        """
        if card_num < 0 or card_num > MAX_CARD_NUM:
            return None

        return (
            self.session.query(Patron)
            .filter(
                Patron.name == name,
                Patron.card_num == card_num
            )
            .first()
        )

    def create_patron(self, card_num: int, name: str) -> Patron:
        """Create a new patron.

        Args:
            card_num: The library card number
            name: The patron's name

        Returns:
            The created Patron object

        Raises:
            ValueError: If the card number is out of range or already issued
        """
        if card_num < 0 or card_num > MAX_CARD_NUM:
            raise ValueError(f"Card number {card_num} is out of range")

        existing = self.get_by_card_num(card_num)
        if existing:
            raise ValueError(f"Card number {card_num} is already issued to '{existing.name}'")

        patron = Patron(card_num=card_num, name=name)
        self.session.add(patron)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return patron
