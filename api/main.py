# api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import (
    authors, book_by_user, book_genres, books, bookshelf_books,
    bookshelves, genres, images, profiles, reviews, users
)
from core.config import settings
from core.logging_config import configure_logging
from core.sa.database import Database

logger = logging.getLogger(__name__)

ROUTERS = [
    users.router,
    books.router,
    authors.router,
    genres.router,
    profiles.router,
    reviews.router,
    book_by_user.router,
    book_genres.router,
    bookshelves.router,
    bookshelf_books.router,
    images.router,
]


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        message = error["msg"].removeprefix("Value error, ")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API around a Database created once at startup.

    Args:
        database: Shared Database; when None one is built from DATABASE_URL

    Returns:
        Configured FastAPI application
    """
    configure_logging(settings.log_level)
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init_db()
        logger.info("Virtual library API started")
        yield
        database.dispose()

    app = FastAPI(title="Virtual Library", lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
            message = "Endpoint not found"
        return JSONResponse(status_code=exc.status_code, content={"message": message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)}
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"}
        )

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Virtual Library API"}

    for router in ROUTERS:
        app.include_router(router, prefix="/api")

    return app
