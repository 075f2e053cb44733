"""
Subscription Gateway - FastAPI Application
Plans, subscriptions and contact messages over the hosted database
"""
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from subscription_gateway import __version__
from subscription_gateway.api.routes import contact, health, messages, plans, subscribe
from subscription_gateway.config import Settings, get_settings
from subscription_gateway.core.exceptions import ClientError
from subscription_gateway.core.logger import configure_logging, get_logger
from subscription_gateway.database import (
    check_database_connection,
    create_db_engine,
    create_session_factory,
    init_db,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    settings: Settings = app.state.settings
    engine = app.state.engine
    configure_logging(settings.log_level)
    logger.info("Starting %s...", settings.app_name)

    if not settings.supabase_url or not settings.supabase_service_key:
        logger.warning("Missing Supabase environment variables (SUPABASE_URL, SUPABASE_SERVICE_KEY)")

    if settings.init_db_on_startup:
        try:
            seeded = init_db(engine)
            logger.info("Database initialized, %s plans seeded", seeded)
        except Exception as e:
            logger.error(f"Database initialization failed: {str(e)}")
    elif not check_database_connection(engine):
        logger.warning("Database is not reachable at startup")

    logger.info(f"API running on {settings.app_env} environment")
    yield
    engine.dispose()
    logger.info("Shutting down %s...", settings.app_name)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.reason)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.reason},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Backend API for plan listing, subscriptions and contact messages",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(cors.allowed_origins),
        allow_credentials=cors.credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    prefix = settings.api_prefix
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(plans.router, prefix=prefix, tags=["Plans"])
    app.include_router(subscribe.router, prefix=prefix, tags=["Subscriptions"])
    app.include_router(contact.router, prefix=prefix, tags=["Contact"])
    if settings.enable_messages_endpoint:
        app.include_router(messages.router, prefix=prefix, tags=["Messages"])

    return app


app = create_app()


def run() -> None:
    """Start the HTTP listener unless a serverless host invokes ``app`` itself."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.serverless:
        logger.info("Serverless mode: not starting a listener, exporting app only")
        return
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
