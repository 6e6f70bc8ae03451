# api/dependencies.py
from typing import Iterator
from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Iterator[Session]:
    """One session per request from the Database the app was built with"""
    session = request.app.state.database.get_session()
    try:
        yield session
    finally:
        session.close()
