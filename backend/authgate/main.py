"""
authgate Backend - FastAPI Application

Registers users, verifies credentials and issues bearer tokens that gate
access to protected endpoints.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from authgate import __version__
from authgate.config import Settings, get_settings
from authgate.core.errors import AuthError, Unauthenticated
from authgate.core.gate import AccessGate
from authgate.core.security import PasswordHasher
from authgate.core.tokens import TokenService
from authgate.database.connections import build_user_store, close_connections
from authgate.database.stores import UserStore
from authgate.routers import auth, health, users
from authgate.services.auth_service import AuthService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Prepare the user store (unique indexes for MongoDB); errors abort startup

    Shutdown:
    - Close the user store and all database connections
    """
    logger.info("Starting up authgate...")

    # Startup fails if the store cannot enforce uniqueness
    await app.state.user_store.initialize()
    logger.info("User store ready")

    yield

    logger.info("Shutting down authgate...")
    await app.state.user_store.close()
    await close_connections()
    logger.info("Database connections closed")


def register_exception_handlers(app: FastAPI) -> None:
    """Convert every failure into an ``{"error": message}`` response."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        logger.debug(f"Rejected request body on {request.url.path}: {fields}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = "Route not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
) -> FastAPI:
    """
    Build the application from an explicit settings value.

    Args:
        settings: Configuration (defaults to environment via ``get_settings``)
        user_store: Store to use instead of the one selected by settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="authgate API",
        description="""
## Authentication API

Register an account, log in to receive a bearer token, and call protected
endpoints with it.

### Authentication
Protected endpoints require the token in the Authorization header:
```
GET /api/profile
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /api/login`. Tokens expire 24 hours after issuance.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    token_service = TokenService(settings)
    app.state.settings = settings
    app.state.user_store = user_store or build_user_store(settings)
    app.state.token_service = token_service
    app.state.access_gate = AccessGate(token_service)
    app.state.auth_service = AuthService(
        store=app.state.user_store,
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        token_service=token_service,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "authgate API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


configure_logging(get_settings())

# Create FastAPI application
app = create_app()
