import click
from typing import List
from core.sa.models import Book

def print_books(books: List[Book], heading: str):
    """Print a numbered list of books with author and genres"""
    click.echo("\n" + click.style(heading, fg='blue'))
    if not books:
        click.echo(click.style("  (none)", fg='yellow'))
        return

    for index, book in enumerate(books, start=1):
        genres = ", ".join(book.genre_names) or "no genres"
        click.echo(
            click.style(f"  {index}. ", fg='blue') +
            click.style(book.title, fg='cyan') +
            f" by {book.author.full_name} ({genres})"
        )
