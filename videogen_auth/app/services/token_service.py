from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel


class TokenErrorKind(str, Enum):
    expired = "expired"
    invalid = "invalid"  # malformed, bad signature, wrong issuer/audience
    other = "other"


class TokenVerificationError(Exception):
    def __init__(self, kind: TokenErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class TokenClaims(BaseModel):
    """Identity claims carried by both access and refresh tokens"""

    sub: str
    email: str
    plan: str
    is_admin: bool


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str


class ITokenService(ABC):
    """Issues and verifies signed, expiring access/refresh tokens"""

    @abstractmethod
    def issue_pair(self, claims: TokenClaims) -> TokenPair:
        pass

    @abstractmethod
    def verify_access(self, token: str) -> Dict[str, Any]:
        """Return the decoded payload or raise TokenVerificationError"""
        pass

    @abstractmethod
    def verify_refresh(self, token: str) -> Dict[str, Any]:
        """Return the decoded payload or raise TokenVerificationError"""
        pass
