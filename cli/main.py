# cli/main.py
import click
from core.config import settings
from core.logging_config import configure_logging
from .commands.db import init_db
from .commands.serve import serve
from .commands.reading import recommend, progress

@click.group()
@click.option('--log-level', default=None, help='Override LOG_LEVEL for this run')
def cli(log_level):
    """Virtual Library CLI"""
    configure_logging(log_level or settings.log_level)

cli.add_command(init_db)
cli.add_command(serve)
cli.add_command(recommend)
cli.add_command(progress)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
