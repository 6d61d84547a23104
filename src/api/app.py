import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.smtp_notifier import SmtpNotifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.session_token_service import SessionTokenService

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    error_dict = {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    logger.error(f"Store error: {exc.__class__.__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Account Service", version="0.1.0", lifespan=lifespan)

    # Everything below is built once from the config passed in; request
    # handlers reach it through src.depends
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    app.state.password_hasher = hasher
    app.state.session_tokens = SessionTokenService(
        secret=ApplicationConfig.JWT_SECRET,
        lifetime=timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS),
    )
    app.state.reset_tokens = ResetTokenService(
        hasher, lifetime=timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES)
    )
    app.state.notifier = SmtpNotifier(
        host=ApplicationConfig.EMAIL_HOST,
        port=ApplicationConfig.EMAIL_PORT,
        username=ApplicationConfig.EMAIL_USER,
        password=ApplicationConfig.EMAIL_PASSWORD,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import health_check, users

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(users.router, prefix=ApplicationConfig.API_PREFIX, tags=["Users"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    return app
