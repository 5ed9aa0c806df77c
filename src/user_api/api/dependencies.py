"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Database, service and handler stored in app.state during lifespan
    - Dependency functions retrieve them from request.app.state
    - The parameter bag is built per request and handed to the handler
"""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Request

from user_api.handlers import UserHandler
from user_api.protocols import Database
from user_api.repositories import SqliteDatabase
from user_api.services import UserService

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_user_service(request: Request) -> UserService:
    """Dependency injection for UserService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise RuntimeError("UserService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> UserHandler:
    """Dependency injection for UserHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "user_handler", None)
    if handler is None:
        raise RuntimeError("UserHandler not initialized. Check lifespan setup.")
    return handler


async def read_params(request: Request) -> dict[str, Any]:
    """Build the parameter bag for one request.

    Query-string parameters are read first and the body (JSON object or
    form-encoded) is layered on top, so body values win. A body that is not
    a JSON object contributes nothing.
    """
    params: dict[str, Any] = dict(request.query_params)

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        try:
            body = await request.json()
        except ValueError:
            logger.warning("Ignoring malformed JSON body on %s", request.url.path)
            return params
        if isinstance(body, dict):
            params.update(body)
        else:
            logger.warning("Ignoring non-object JSON body on %s", request.url.path)
    elif content_type in _FORM_TYPES:
        form = await request.form()
        params.update(form.items())

    return params


def build_lifespan(database: Database | None = None) -> Callable[[FastAPI], Any]:
    """Create the lifespan context manager for the app.

    Args:
        database: Store accessor to use. If None, a SqliteDatabase is created
            from settings (schema ensured) at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initializes all layers and stores them in app.state:
        1. Database (data access)
        2. UserService (statements) - app.state.user_service
        3. UserHandler (validation and envelopes) - app.state.user_handler
        """
        db = database if database is not None else SqliteDatabase.create()
        user_service = UserService(database=db)
        user_handler = UserHandler(user_service=user_service)

        app.state.database = db
        app.state.user_service = user_service
        app.state.user_handler = user_handler

        logger.info("User service initialized (healthy=%s)", user_service.is_healthy())

        yield

        del app.state.user_handler
        del app.state.user_service
        del app.state.database
        logger.info("User service shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[UserHandler, Depends(get_handler)]
ServiceDep = Annotated[UserService, Depends(get_user_service)]
ParamsDep = Annotated[dict[str, Any], Depends(read_params)]
