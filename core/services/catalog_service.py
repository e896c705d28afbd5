# core/services/catalog_service.py
import logging
from typing import List, Dict, Any
from sqlalchemy.orm import Session

from core.session import PatronSession
from core.sa.repositories import TitleRepository, PatronRepository, CheckoutRepository
from core.services.exceptions import NotLoggedInError

logger = logging.getLogger(__name__)

class CatalogService:
    """Patron-facing catalog operations.

    Every method works on the caller's PatronSession and the given database
    session; nothing is kept between calls.
    """

    def __init__(self, db: Session):
        self.db = db
        self.titles = TitleRepository(db)
        self.patrons = PatronRepository(db)
        self.checkouts = CheckoutRepository(db)

    def authenticate(self, session: PatronSession, name: str, card_num: int) -> bool:
        """Log a patron in if the name and card number match a patron record.

        The session is left untouched when they do not match.
        """
        patron = self.patrons.find_by_credentials(name, card_num)
        if patron is None:
            logger.info(f"Login rejected for card {card_num}")
            return False

        session.login(name, card_num)
        logger.info(f"Patron {card_num} logged in")
        return True

    def logout(self, session: PatronSession) -> bool:
        if session.logged_in:
            logger.info(f"Patron {session.card_num} logged out")
        session.clear()
        return True

    def list_catalog(self) -> List[Dict[str, Any]]:
        return self.titles.list_catalog()

    def list_my_checkouts(self, session: PatronSession) -> List[Dict[str, Any]]:
        """List the session patron's loans; empty when nobody is logged in."""
        return self.checkouts.list_for_card(session.card_num)

    def check_out(self, session: PatronSession, serial: int) -> bool:
        """Lend a copy to the session patron.

        Availability is not re-checked here. Storage errors propagate.

        Raises:
            NotLoggedInError: If the session has no patron
        """
        if not session.logged_in:
            raise NotLoggedInError("Log in to check out a book")

        self.checkouts.check_out(serial, session.card_num)
        logger.info(f"Serial {serial} checked out to card {session.card_num}")
        return True

    def return_book(self, session: PatronSession, serial: int) -> bool:
        """Return a copy held by the session patron.

        Returning a copy the patron does not hold is a no-op.
        """
        if self.checkouts.return_copy(serial, session.card_num):
            logger.info(f"Serial {serial} returned by card {session.card_num}")
        else:
            logger.debug(f"No loan of serial {serial} for card {session.card_num}; nothing to return")
        return True
