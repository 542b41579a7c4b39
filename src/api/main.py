"""FastAPI application entry point."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (like api.config)
load_dotenv()

# Add src to path
# main.py is at /app/src/api/main.py
# src is at /app/src, so we go up 2 levels
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from adapter.memory.user_store import InMemoryUserStore
from api import config
from api.errors import register_exception_handlers
from api.routes import health, users
from port.user_store import UserStore
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging(
    level=config.LOG_LEVEL or ("INFO" if config.is_production() else "DEBUG"),
    service=config.APP_NAME,
    log_dir=config.LOG_DIR,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    logger.info(
        f"Server running in {config.APP_ENV} mode on port {config.PORT}",
        extra={"apiPrefix": config.API_PREFIX, "version": config.VERSION},
    )
    yield  # App runs here
    logger.info("Shutting down", extra={"users": app.state.user_store.count()})


def _configure_cors(app: FastAPI) -> None:
    # Browsers don't support credentials with a wildcard origin
    if config.CORS_ORIGINS == "*":
        origins = ["*"]
        allow_credentials = False
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains"
        )
    else:
        origins = [origin.strip() for origin in config.CORS_ORIGINS.split(",") if origin.strip()]
        allow_credentials = True
        logger.debug(f"CORS configured with specific origins: {origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=config.CORS_METHODS,
        allow_headers=["*"],
    )


def create_app(user_store: UserStore | None = None) -> FastAPI:
    """Build the application around a single user store instance.

    The store lives on ``app.state`` for the lifetime of the process; pass
    one in to share it or to start from a known state.
    """
    app = FastAPI(
        title=config.APP_NAME,
        description="User account management API backed by an in-memory store",
        version=config.VERSION,
        lifespan=lifespan,
    )
    app.state.user_store = user_store if user_store is not None else InMemoryUserStore()

    _configure_cors(app)
    register_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info("Request completed", extra={
            "method": request.method,
            "path": request.url.path,
            "statusCode": response.status_code,
            "duration": f"{duration_ms:.0f}ms",
        })
        return response

    app.include_router(health.router, prefix=config.API_PREFIX)
    app.include_router(users.router, prefix=config.API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": config.APP_NAME,
            "version": config.VERSION,
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    # Request logging middleware replaces uvicorn's access log
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=config.PORT,
        access_log=False,
    )
