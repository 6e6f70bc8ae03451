import click
from core.sa.database import Database

@click.command('init-db')
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def init_db(database_url):
    """Create every table in the configured database"""
    db = Database(database_url)
    try:
        db.init_db()
        click.echo(click.style("Database schema created", fg='green'))
    finally:
        db.dispose()
