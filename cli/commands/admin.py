import click
from sqlalchemy.exc import IntegrityError
from core.sa.database import Database
from core.sa.models import Title, InventoryItem, Patron, CheckedOut
from core.sa.repositories import TitleRepository, InventoryRepository, PatronRepository

# (isbn, title, author, serials)
SAMPLE_TITLES = [
    ("978-0441172719", "Dune", "Frank Herbert", []),
    ("978-0547928227", "The Hobbit", "J.R.R. Tolkien", [1001]),
    ("978-0316769488", "The Catcher in the Rye", "J.D. Salinger", [1002]),
    ("978-0062316097", "Sapiens", "Yuval Noah Harari", [1003, 1004]),
    ("978-0143127550", "Everything I Never Told You", "Celeste Ng", [1005]),
]

SAMPLE_PATRONS = [
    (1, "Ada"),
    (2, "Grace"),
    (3, "Linus"),
]

# (serial, card_num)
SAMPLE_LOANS = [
    (1002, 1),
    (1004, 2),
]

def _fail(ctx: click.Context, message: str) -> None:
    """Print an error and exit with status 1."""
    click.echo(click.style(f"Error: {message}", fg='red'))
    ctx.exit(1)

@click.command('init-db')
@click.pass_obj
def init_db(db: Database):
    """Create the catalog tables"""
    db.init_db()
    click.echo(click.style("Database initialized", fg='green'))

@click.command('add-patron')
@click.argument('name')
@click.argument('card_num', type=int)
@click.pass_context
def add_patron(ctx, name, card_num):
    """Issue a library card to a patron"""
    db: Database = ctx.obj
    try:
        with db.get_db() as session:
            PatronRepository(session).create_patron(card_num, name)
    except ValueError as e:
        _fail(ctx, str(e))
    click.echo(click.style(f"Added patron {name} (card {card_num})", fg='green'))

@click.command('add-title')
@click.argument('isbn')
@click.argument('title')
@click.argument('author')
@click.pass_context
def add_title(ctx, isbn, title, author):
    """Add a title to the catalog"""
    db: Database = ctx.obj
    try:
        with db.get_db() as session:
            TitleRepository(session).create_title(isbn, title, author)
    except IntegrityError:
        _fail(ctx, f"Title with ISBN {isbn} already exists")
    click.echo(click.style(f"Added {title} by {author}", fg='green'))

@click.command('add-copy')
@click.argument('serial', type=int)
@click.argument('isbn')
@click.pass_context
def add_copy(ctx, serial, isbn):
    """Register a physical copy of a title"""
    db: Database = ctx.obj
    with db.get_db() as session:
        if TitleRepository(session).get_by_isbn(isbn) is None:
            _fail(ctx, f"No title with ISBN {isbn}")
        if InventoryRepository(session).get_by_serial(serial) is not None:
            _fail(ctx, f"Serial {serial} is already in the inventory")
        InventoryRepository(session).add_copy(serial, isbn)
    click.echo(click.style(f"Added copy {serial} of {isbn}", fg='green'))

@click.command()
@click.pass_context
def seed(ctx):
    """Load a small sample catalog into an empty database"""
    db: Database = ctx.obj
    db.init_db()
    try:
        # One unit of work: a failure leaves the database empty
        with db.get_db() as session:
            if session.query(Title).first() is not None:
                click.echo(click.style("Catalog already has titles, skipping seed", fg='yellow'))
                return

            for isbn, title, author, _ in SAMPLE_TITLES:
                session.add(Title(isbn=isbn, title=title, author=author))
            session.add_all(Patron(card_num=card_num, name=name) for card_num, name in SAMPLE_PATRONS)
            session.flush()

            for isbn, _, _, serials in SAMPLE_TITLES:
                session.add_all(InventoryItem(serial=serial, isbn=isbn) for serial in serials)
            session.flush()

            session.add_all(CheckedOut(serial=serial, card_num=card_num) for serial, card_num in SAMPLE_LOANS)
            session.flush()
    except IntegrityError as e:
        _fail(ctx, f"Sample data rejected, nothing was loaded ({e.orig})")

    click.echo(click.style(
        f"Seeded {len(SAMPLE_TITLES)} titles, {len(SAMPLE_PATRONS)} patrons and {len(SAMPLE_LOANS)} loans",
        fg='green'
    ))
