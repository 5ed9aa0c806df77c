import logging
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from user_api.api.dependencies import HandlerDep, ParamsDep, ServiceDep, build_lifespan
from user_api.config import settings
from user_api.dto import ApiResponse, HealthCheckResponse
from user_api.protocols import Database, PersistenceError
from user_api.utils import server_error

logger = logging.getLogger(__name__)

API_NAME = "User Management API"
API_VERSION = "1.0.0"

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "endpoints": {
            "save_user": "/api/user/saveUser",
            "get_detail": "/api/user/getDetail",
            "health": "/health",
            "docs": "/docs",
        },
    }


@router.get("/health", response_model=HealthCheckResponse)
async def health(users: ServiceDep) -> HealthCheckResponse:
    """Health check endpoint."""
    if not users.is_healthy():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not reachable",
        )
    return HealthCheckResponse(status="healthy", database_healthy=True)


@router.post("/api/user/saveUser", response_model=ApiResponse)
async def save_user(params: ParamsDep, handler: HandlerDep) -> ApiResponse:
    """
    Save a user: create when ``id`` is absent, update otherwise.

    Accepts a JSON or form-encoded body with ``name``, ``loginName`` and
    optional ``id``.
    """
    envelope = await run_in_threadpool(handler.save_user, params)
    return ApiResponse.from_envelope(envelope)


@router.post("/api/user/getDetail", response_model=ApiResponse)
async def get_detail(params: ParamsDep, handler: HandlerDep) -> ApiResponse:
    """
    Get a user's detail by ``id``.

    Accepts a JSON or form-encoded body with ``id``.
    """
    envelope = await run_in_threadpool(handler.get_detail, params)
    return ApiResponse.from_envelope(envelope)


async def persistence_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn a store failure into a 500 envelope without leaking its text."""
    logger.error("Persistence failure on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=server_error().to_dict(),
    )


def create_app(database: Database | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        database: Store accessor. If None, a SqliteDatabase from settings is
            opened at startup.
    """
    app = FastAPI(
        title=API_NAME,
        description="Save and fetch platform users behind a uniform {code, message, data} envelope",
        version=API_VERSION,
        lifespan=build_lifespan(database),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "user_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
