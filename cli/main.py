# cli/main.py
import logging
import os
import click
from core.sa.database import Database
from .commands.admin import init_db, add_patron, add_title, add_copy, seed
from .commands.catalog import catalog, loans

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL (defaults to DATABASE_URL or sqlite:///library.db)')
@click.pass_context
def cli(ctx, database_url):
    """Library Catalog CLI"""
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    ctx.obj = Database(database_url)

cli.add_command(init_db)
cli.add_command(add_patron)
cli.add_command(add_title)
cli.add_command(add_copy)
cli.add_command(seed)
cli.add_command(catalog)
cli.add_command(loans)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
