from datetime import timedelta
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from videogen_auth.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from videogen_auth.adapter.services.email_notification_gateway import (
    EmailTemplates,
    LoggingNotificationGateway,
    SmtpNotificationGateway,
)
from videogen_auth.adapter.services.jwt_token_service import JwtTokenService
from videogen_auth.adapter.services.random_code_generator import RandomCodeGenerator
from videogen_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from videogen_auth.api.error import ClientError
from videogen_auth.app.services.code_generator import ICodeGenerator
from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.token_service import (
    ITokenService,
    TokenErrorKind,
    TokenVerificationError,
)
from videogen_auth.app.use_cases import errors
from videogen_auth.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_code_generator() -> ICodeGenerator:
    return RandomCodeGenerator()


@lru_cache
def get_token_service() -> ITokenService:
    return JwtTokenService(
        access_secret=ApplicationConfig.JWT_ACCESS_SECRET,
        refresh_secret=ApplicationConfig.JWT_REFRESH_SECRET,
        issuer=ApplicationConfig.JWT_ISSUER,
        audience=ApplicationConfig.JWT_AUDIENCE,
        access_ttl=timedelta(minutes=ApplicationConfig.JWT_ACCESS_TOKEN_TTL_MINUTES),
        refresh_ttl=timedelta(minutes=ApplicationConfig.JWT_REFRESH_TOKEN_TTL_MINUTES),
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )


@lru_cache
def get_notification_gateway() -> INotificationGateway:
    templates = EmailTemplates(
        app_name=ApplicationConfig.APP_NAME,
        app_url=ApplicationConfig.APP_URL,
        code_ttl_minutes=ApplicationConfig.CODE_TTL_MINUTES,
    )
    if not ApplicationConfig.SMTP_HOST:
        return LoggingNotificationGateway(templates)
    return SmtpNotificationGateway(
        templates,
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        from_email=ApplicationConfig.EMAIL_FROM,
        username=ApplicationConfig.SMTP_USERNAME,
        password=ApplicationConfig.SMTP_PASSWORD,
        use_tls=ApplicationConfig.SMTP_USE_TLS,
        timeout=ApplicationConfig.SMTP_TIMEOUT_SECONDS,
    )


def get_code_ttl() -> timedelta:
    return timedelta(minutes=ApplicationConfig.CODE_TTL_MINUTES)


class CurrentUser(BaseModel):
    """Identity asserted by a verified access token"""

    id: UUID
    email: str
    plan: str
    is_admin: bool


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: ITokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Dependency to extract and verify the access token from the Authorization header.

    Raises:
        ClientError: 401 TOKEN_EXPIRED if the token has expired (client should
            refresh), 401 INVALID_TOKEN for any other failure
    """
    if credentials is None:
        raise ClientError(
            Error(errors.INVALID_TOKEN, "Access denied. No token provided."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        payload = tokens.verify_access(credentials.credentials)
    except TokenVerificationError as exc:
        if exc.kind == TokenErrorKind.expired:
            raise ClientError(
                Error(errors.TOKEN_EXPIRED, "Access token expired. Please refresh your token."),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        raise ClientError(
            Error(errors.INVALID_TOKEN, "Invalid access token."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        return CurrentUser(
            id=UUID(str(payload["sub"])),
            email=payload["email"],
            plan=payload["plan"],
            is_admin=payload["is_admin"],
        )
    except (KeyError, ValueError):
        raise ClientError(
            Error(errors.INVALID_TOKEN, "Invalid access token."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
