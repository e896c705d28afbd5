# tests/test_repositories/test_title_repository.py

import pytest
from sqlalchemy.exc import IntegrityError
from core.sa.repositories.title import TitleRepository
from core.sa.models import Title, InventoryItem, Patron, CheckedOut

@pytest.fixture
def title_repo(db_session):
    """Fixture to create a TitleRepository instance."""
    return TitleRepository(db_session)

def test_list_catalog_one_row_per_title_and_copy(title_repo, reference_catalog):
    """Test the catalog decorates each copy with its borrower."""
    rows = title_repo.list_catalog()
    assert len(rows) == 3

    by_title = {row["title"]: row for row in rows}
    assert by_title["Dune"] == {
        "isbn": "978-0441172719",
        "title": "Dune",
        "author": "Frank Herbert",
        "serial": None,
        "name": ""
    }
    assert by_title["The Hobbit"]["serial"] == 100
    assert by_title["The Hobbit"]["name"] == ""
    assert by_title["Emma"]["serial"] == 200
    assert by_title["Emma"]["name"] == "Alice"

def test_list_catalog_empty(title_repo):
    """Test an empty catalog yields no rows."""
    assert title_repo.list_catalog() == []

def test_list_catalog_fans_out_multiple_copies(title_repo, two_patron_loans):
    """Test a title with several copies gets one row per copy."""
    rows = [row for row in title_repo.list_catalog() if row["isbn"] == "isbn-c"]
    assert [row["serial"] for row in rows] == [12, 13]
    assert [row["name"] for row in rows] == ["Dave", ""]

def test_list_catalog_borrower_without_name(title_repo, db_session):
    """Test a borrower with no recorded name shows as an empty string."""
    db_session.add_all([
        Title(isbn="isbn-x", title="Nameless Loan", author="Someone"),
        Patron(card_num=9, name=None),
    ])
    db_session.flush()
    db_session.add(InventoryItem(serial=300, isbn="isbn-x"))
    db_session.flush()
    db_session.add(CheckedOut(serial=300, card_num=9))
    db_session.commit()

    rows = title_repo.list_catalog()
    assert rows == [{
        "isbn": "isbn-x",
        "title": "Nameless Loan",
        "author": "Someone",
        "serial": 300,
        "name": ""
    }]

def test_list_catalog_returned_copy_is_available(title_repo, db_session, reference_catalog):
    """Test deleting the loan clears the borrower name."""
    db_session.query(CheckedOut).filter(CheckedOut.serial == 200).delete()
    db_session.commit()

    emma = next(row for row in title_repo.list_catalog() if row["serial"] == 200)
    assert emma["name"] == ""

def test_get_by_isbn(title_repo, reference_catalog):
    """Test fetching a title by ISBN."""
    title = title_repo.get_by_isbn("978-0441172719")
    assert title is not None
    assert title.title == "Dune"
    assert title.copies == []

def test_get_by_nonexistent_isbn(title_repo):
    assert title_repo.get_by_isbn("missing") is None

def test_create_title(title_repo):
    """Test creating a new title."""
    title = title_repo.create_title("isbn-new", "New Book", "New Author")
    assert title.isbn == "isbn-new"
    assert title_repo.get_by_isbn("isbn-new").author == "New Author"

def test_create_duplicate_title(title_repo, reference_catalog):
    """Test the ISBN key rejects a duplicate title."""
    with pytest.raises(IntegrityError):
        title_repo.create_title("978-0441172719", "Dune Again", "Frank Herbert")
    assert title_repo.get_by_isbn("978-0441172719").title == "Dune"
