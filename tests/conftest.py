# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from core.sa.models import Base, Title, InventoryItem, Patron, CheckedOut
from core.sa.database import Database

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_catalog.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance"""
    db = Database(test_db_url)

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete in reverse order of dependencies
    db_session.execute(text("DELETE FROM checked_out"))
    db_session.execute(text("DELETE FROM inventory"))
    db_session.execute(text("DELETE FROM patrons"))
    db_session.execute(text("DELETE FROM titles"))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def reference_catalog(db_session):
    """Three titles: one not owned, one available copy, one copy on loan to Alice."""
    db_session.add_all([
        Title(isbn="978-0441172719", title="Dune", author="Frank Herbert"),
        Title(isbn="978-0547928227", title="The Hobbit", author="J.R.R. Tolkien"),
        Title(isbn="978-0141439587", title="Emma", author="Jane Austen"),
        Patron(card_num=7, name="Alice"),
        Patron(card_num=8, name="Bob"),
    ])
    db_session.flush()
    db_session.add_all([
        InventoryItem(serial=100, isbn="978-0547928227"),
        InventoryItem(serial=200, isbn="978-0141439587"),
    ])
    db_session.flush()
    db_session.add(CheckedOut(serial=200, card_num=7))
    db_session.commit()
    db_session.expunge_all()

@pytest.fixture
def two_patron_loans(db_session):
    """Card 1 holds serials 10 and 11, card 2 holds serial 12; serial 13 is free."""
    db_session.add_all([
        Title(isbn="isbn-a", title="Title A", author="Author A"),
        Title(isbn="isbn-b", title="Title B", author="Author B"),
        Title(isbn="isbn-c", title="Title C", author="Author C"),
        Patron(card_num=1, name="Carol"),
        Patron(card_num=2, name="Dave"),
    ])
    db_session.flush()
    db_session.add_all([
        InventoryItem(serial=10, isbn="isbn-a"),
        InventoryItem(serial=11, isbn="isbn-b"),
        InventoryItem(serial=12, isbn="isbn-c"),
        InventoryItem(serial=13, isbn="isbn-c"),
    ])
    db_session.flush()
    db_session.add_all([
        CheckedOut(serial=10, card_num=1),
        CheckedOut(serial=11, card_num=1),
        CheckedOut(serial=12, card_num=2),
    ])
    db_session.commit()
    db_session.expunge_all()
