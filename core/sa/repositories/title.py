from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
from core.sa.models import Title, InventoryItem, CheckedOut, Patron

class TitleRepository:
    """Repository for managing Title entities and the catalog listing."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_isbn(self, isbn: str) -> Optional[Title]:
        """Get a title by its ISBN.

        Args:
            isbn: The ISBN of the title to retrieve

        Returns:
            The Title object if found, None otherwise
        """
        return self.session.query(Title).filter(Title.isbn == isbn).first()

    def create_title(self, isbn: str, title: str, author: str) -> Title:
        """Create a new title.

        Args:
            isbn: The ISBN, used as the natural key
            title: The title of the book
            author: The author of the book

        Returns:
            The created Title object
        """
        record = Title(isbn=isbn, title=title, author=author)
        self.session.add(record)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return record

    def list_catalog(self) -> List[Dict[str, Any]]:
        """List every title with its copies, loan state and borrower.

        Titles are left joined to inventory, inventory to loans, and loans to
        patrons. A title without copies yields one row with a null serial; a
        title with several copies yields one row per copy. ``name`` is the
        borrower's name, or an empty string when the copy is not on loan.

        Returns:
            List of dicts with isbn, title, author, serial and name
        """
        rows = (
            self.session.query(
                Title.isbn,
                Title.title,
                Title.author,
                InventoryItem.serial,
                Patron.name
            )
            .outerjoin(InventoryItem, InventoryItem.isbn == Title.isbn)
            .outerjoin(CheckedOut, CheckedOut.serial == InventoryItem.serial)
            .outerjoin(Patron, Patron.card_num == CheckedOut.card_num)
            .order_by(Title.isbn, InventoryItem.serial)
            .all()
        )

        return [
            {
                "isbn": row.isbn,
                "title": row.title,
                "author": row.author,
                "serial": row.serial,
                "name": row.name or ""
            }
            for row in rows
        ]
