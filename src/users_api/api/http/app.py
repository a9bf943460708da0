"""FastAPI application factory and setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.users_api.api.http.app_data import ApplicationDependencies
from src.users_api.api.http.middleware.content_type import JSONContentTypeMiddleware
from src.users_api.api.http.middleware.cors import CORSMiddleware
from src.users_api.api.http.middleware.request_logging import log_requests
from src.users_api.api.http.routers import health, users
from src.users_api.api.utils.app_startup import configure_logging
from src.users_api.core.exceptions import UserNotFoundError
from src.users_api.core.services import DbManageService, DbSessionService
from src.users_api.runtime.config.config_data import ConfigData
from src.users_api.runtime.config.config_template import validate_config_env_vars
from src.users_api.runtime.context import get_config

__all__ = ["app", "create_app", "startup", "shutdown"]


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config: ConfigData = app.state.config
    logger.info("Starting up application in {} environment", config.app.environment)

    for var, description in validate_config_env_vars().items():
        logger.warning("{} is not set ({}); using configured default", var, description)

    database_service = DbSessionService(config.database)
    try:
        # Unreachable database is fatal: let the error stop the process
        DbManageService(database_service.engine).create_all()
    except Exception:
        database_service.dispose()
        raise

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


# --- Exception handlers ---
async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> Response:
    logger.info("User not found: {}", exc.user_id)
    return Response(status_code=404)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.bind(error_type=type(exc).__name__).warning("request.validation_error")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.opt(exception=exc).error("Database error while handling request")
    return JSONResponse(status_code=500, content={"detail": "Database error"})


# --- FastAPI app setup ---
def create_app(config: ConfigData | None = None) -> FastAPI:
    config = config or get_config()
    configure_logging(config)

    # Every response is JSON, so the HTML docs pages are not served
    app = FastAPI(
        title="users-api",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    app.state.config = config

    app.add_exception_handler(UserNotFoundError, user_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    # The last middleware added runs first: CORS, then content type, then logging
    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_middleware(JSONContentTypeMiddleware)
    app.add_middleware(CORSMiddleware, cors=config.app.cors)

    app.include_router(users.router, prefix=config.app.base_path)
    app.include_router(health.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # We handle access logging in middleware
    )
