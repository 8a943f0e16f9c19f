from datetime import UTC, datetime, timedelta
from typing import Any, Dict
from uuid import uuid4

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from videogen_auth.app.services.token_service import (
    ITokenService,
    TokenClaims,
    TokenErrorKind,
    TokenPair,
    TokenVerificationError,
)


class JwtTokenService(ITokenService):
    """
    HS256 JWTs signed with python-jose.

    Access and refresh tokens carry the same identity claims but are signed
    with different secrets, so one can never be used in place of the other.
    Both carry iss/aud, validated on decode.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        issuer: str,
        audience: str,
        access_ttl: timedelta = timedelta(days=7),
        refresh_ttl: timedelta = timedelta(days=30),
        algorithm: str = "HS256",
    ):
        if access_secret == refresh_secret:
            raise ValueError("Access and refresh tokens must use distinct secrets")
        self.access_secret = access_secret
        self.refresh_secret = refresh_secret
        self.issuer = issuer
        self.audience = audience
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl
        self.algorithm = algorithm

    def issue_pair(self, claims: TokenClaims) -> TokenPair:
        return TokenPair(
            access_token=self._encode(claims, self.access_secret, self.access_ttl),
            refresh_token=self._encode(claims, self.refresh_secret, self.refresh_ttl),
        )

    def verify_access(self, token: str) -> Dict[str, Any]:
        return self._decode(token, self.access_secret)

    def verify_refresh(self, token: str) -> Dict[str, Any]:
        return self._decode(token, self.refresh_secret)

    def _encode(self, claims: TokenClaims, secret: str, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims.model_dump(),
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "exp": now + ttl,
            "jti": uuid4().hex,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def _decode(self, token: str, secret: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except ExpiredSignatureError as exc:
            raise TokenVerificationError(TokenErrorKind.expired, "Token expired") from exc
        except (JWTClaimsError, JWTError) as exc:
            raise TokenVerificationError(TokenErrorKind.invalid, "Invalid token") from exc
        except Exception as exc:
            raise TokenVerificationError(TokenErrorKind.other, "Token verification failed") from exc
