import click
from core.sa.database import Database
from core.sa.repositories.book_user import BookUserRepository
from core.sa.repositories.user import UserRepository
from ..utils import print_books

@click.command()
@click.argument('user_id', type=int)
@click.option('--by', 'by', type=click.Choice(['author', 'genre']), default='author',
              help='Recommend from the most-read author or genre')
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def recommend(user_id, by, database_url):
    """Recommend unread books from a user's most-read author or genre"""
    db = Database(database_url)
    try:
        with db.get_db() as session:
            if not UserRepository(session).get_by_id(user_id):
                raise click.ClickException(f"User with ID {user_id} not found")

            repo = BookUserRepository(session)
            if by == 'author':
                favourite = repo.most_read_author(user_id)
                name = favourite.full_name if favourite else None
                books = repo.unread_by_most_read_author(user_id)
            else:
                favourite = repo.most_read_genre(user_id)
                name = favourite.name if favourite else None
                books = repo.unread_by_most_read_genre(user_id)

            if name is None:
                click.echo(click.style("This user has not finished any books yet", fg='yellow'))
                return

            click.echo(click.style(f"Most-read {by}: ", fg='blue') + click.style(name, fg='cyan'))
            print_books(books, "Not read yet:")
    finally:
        db.dispose()

@click.command()
@click.argument('user_id', type=int)
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def progress(user_id, database_url):
    """Show the books a user is reading and how far along they are"""
    db = Database(database_url)
    try:
        with db.get_db() as session:
            reading = BookUserRepository(session).get_reading(user_id)
            if not reading:
                click.echo(click.style("Nothing in progress", fg='yellow'))
                return

            for book_user in reading:
                pages = book_user.book.page_count or '?'
                click.echo(
                    click.style(f"{book_user.progress:6.1f}% ", fg='green') +
                    click.style(book_user.book.title, fg='cyan') +
                    f" (page {book_user.current_page or 0} of {pages})"
                )
    finally:
        db.dispose()
