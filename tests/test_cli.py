# tests/test_cli.py

from click.testing import CliRunner
from cli.main import cli

def test_init_db(tmp_path):
    url = f"sqlite:///{tmp_path / 'cli.db'}"
    result = CliRunner().invoke(cli, ['init-db', '--database-url', url])

    assert result.exit_code == 0
    assert "schema created" in result.output

def test_recommend_by_author(database, sample_user, sample_author, sample_genre, make_book, mark):
    read = make_book("Read One", sample_author, [sample_genre])
    make_book("Unread One", sample_author, [sample_genre])
    mark(sample_user, read, "read")

    result = CliRunner().invoke(
        cli, ['recommend', str(sample_user.id), '--database-url', database.connection_string]
    )

    assert result.exit_code == 0
    assert "Jane Doe" in result.output
    assert "Unread One" in result.output
    assert "Read One" not in result.output

def test_recommend_without_read_books(database, sample_user):
    result = CliRunner().invoke(
        cli, ['recommend', str(sample_user.id), '--by', 'genre', '--database-url', database.connection_string]
    )

    assert result.exit_code == 0
    assert "not finished any books" in result.output

def test_recommend_unknown_user(database):
    result = CliRunner().invoke(cli, ['recommend', '999', '--database-url', database.connection_string])
    assert result.exit_code != 0
    assert "not found" in result.output

def test_progress(database, sample_user, sample_book, mark):
    mark(sample_user, sample_book, "reading", current_page=50)

    result = CliRunner().invoke(
        cli, ['progress', str(sample_user.id), '--database-url', database.connection_string]
    )

    assert result.exit_code == 0
    assert "25.0%" in result.output
    assert "Test Book" in result.output
