import click
from core.sa.database import Database
from core.sa.repositories import TitleRepository, CheckoutRepository, PatronRepository

@click.command()
@click.pass_obj
def catalog(db: Database):
    """Show every title with the state of each copy"""
    with db.get_db() as session:
        rows = TitleRepository(session).list_catalog()

    if not rows:
        click.echo("No titles in the catalog")
        return

    for row in rows:
        if row['serial'] is None:
            state = click.style("Not owned", fg='bright_black')
        elif row['name']:
            state = click.style(f"Checked out by {row['name']}", fg='yellow')
        else:
            state = click.style("Available", fg='green')
        serial = row['serial'] if row['serial'] is not None else '-'
        click.echo(f"{row['isbn']:<16} {serial!s:>6}  {row['title']} ({row['author']})  {state}")

@click.command()
@click.argument('card_num', type=int)
@click.pass_obj
def loans(db: Database, card_num):
    """Show the books a patron has checked out"""
    with db.get_db() as session:
        patron = PatronRepository(session).get_by_card_num(card_num)
        if patron is None:
            click.echo(click.style(f"No patron with card {card_num}", fg='red'))
            return
        name = patron.name
        rows = CheckoutRepository(session).list_for_card(card_num)

    if not rows:
        click.echo(f"{name} has nothing checked out")
        return

    click.echo(click.style(f"{name} has {len(rows)} book(s) checked out:", fg='blue'))
    for row in rows:
        click.echo(f"  {row['serial']:>6}  {row['title']} ({row['author']})")
