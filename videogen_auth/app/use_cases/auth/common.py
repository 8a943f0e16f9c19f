from datetime import timedelta

from videogen_auth.app.services.token_service import ITokenService, TokenClaims
from videogen_auth.domain.entities import User
from .dtos import AuthResponse, UserView

# Both verification and reset codes live for the same window
DEFAULT_CODE_TTL = timedelta(minutes=10)


def build_claims(user: User) -> TokenClaims:
    return TokenClaims(
        sub=str(user.id),
        email=user.email,
        plan=user.plan_name,
        is_admin=user.is_admin,
    )


def authenticated(user: User, tokens: ITokenService) -> AuthResponse:
    """Issue a fresh token pair for the user and wrap it with the user view."""
    pair = tokens.issue_pair(build_claims(user))
    return AuthResponse(
        user=UserView.from_entity(user),
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
    )
