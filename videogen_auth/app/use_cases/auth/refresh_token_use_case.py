"""
Refresh Token Use Case

Exchanges a valid refresh token for a brand-new token pair.
"""

from uuid import UUID

from videogen_auth.app.services.token_service import (
    ITokenService,
    TokenErrorKind,
    TokenVerificationError,
)
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.libs.result import Error, Result, Return
from .common import build_claims
from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT tokens.

    Business Rules:
    - Refresh token must verify against the refresh secret, issuer and audience
    - Subject must still exist (deleted accounts cannot refresh)
    - Both tokens are rotated; claims are rebuilt from the stored user
    - Expired tokens are reported separately so clients can re-login
    """

    def __init__(self, uow: UnitOfWork, tokens: ITokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        try:
            payload = self.tokens.verify_refresh(refresh_token)
        except TokenVerificationError as exc:
            if exc.kind == TokenErrorKind.expired:
                return Return.err(Error(errors.TOKEN_EXPIRED, "Refresh token expired"))
            return Return.err(Error(errors.INVALID_TOKEN, "Invalid refresh token"))

        try:
            user_id = UUID(str(payload["sub"]))
        except (KeyError, ValueError):
            return Return.err(Error(errors.INVALID_TOKEN, "Invalid refresh token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.INVALID_TOKEN, "Invalid refresh token"))

            claims = build_claims(user)

        pair = self.tokens.issue_pair(claims)
        return Return.ok(
            RefreshTokenResponse(
                access_token=pair.access_token,
                refresh_token=pair.refresh_token,
            )
        )
