from datetime import timedelta

import pytest
from jose import jwt

from videogen_auth.adapter.services.jwt_token_service import JwtTokenService
from videogen_auth.app.services.token_service import (
    TokenClaims,
    TokenErrorKind,
    TokenVerificationError,
)

CLAIMS = TokenClaims(
    sub="5b0c3f4e-8a43-4f41-9d8a-0b5a3f0c7e11",
    email="ann@example.com",
    plan="free",
    is_admin=False,
)


def test_issue_and_verify_pair(token_service):
    pair = token_service.issue_pair(CLAIMS)

    access = token_service.verify_access(pair.access_token)
    refresh = token_service.verify_refresh(pair.refresh_token)

    for payload in (access, refresh):
        assert payload["sub"] == CLAIMS.sub
        assert payload["email"] == "ann@example.com"
        assert payload["plan"] == "free"
        assert payload["is_admin"] is False
        assert payload["iss"] == "videogen-api"
        assert payload["aud"] == "videogen-client"


def test_access_and_refresh_are_not_interchangeable(token_service):
    pair = token_service.issue_pair(CLAIMS)

    with pytest.raises(TokenVerificationError) as exc_info:
        token_service.verify_access(pair.refresh_token)
    assert exc_info.value.kind == TokenErrorKind.invalid

    with pytest.raises(TokenVerificationError) as exc_info:
        token_service.verify_refresh(pair.access_token)
    assert exc_info.value.kind == TokenErrorKind.invalid


def test_consecutive_pairs_differ(token_service):
    first = token_service.issue_pair(CLAIMS)
    second = token_service.issue_pair(CLAIMS)

    assert first.access_token != second.access_token
    assert first.refresh_token != second.refresh_token


def test_expired_token_reports_expired():
    service = JwtTokenService(
        access_secret="a-secret",
        refresh_secret="r-secret",
        issuer="videogen-api",
        audience="videogen-client",
        access_ttl=timedelta(seconds=-5),
    )
    pair = service.issue_pair(CLAIMS)

    with pytest.raises(TokenVerificationError) as exc_info:
        service.verify_access(pair.access_token)

    assert exc_info.value.kind == TokenErrorKind.expired


def test_wrong_audience_is_invalid(token_service):
    forged = jwt.encode(
        {**CLAIMS.model_dump(), "iss": "videogen-api", "aud": "someone-else"},
        "unit-access-secret",
        algorithm="HS256",
    )

    with pytest.raises(TokenVerificationError) as exc_info:
        token_service.verify_access(forged)

    assert exc_info.value.kind == TokenErrorKind.invalid


def test_garbage_token_is_invalid(token_service):
    with pytest.raises(TokenVerificationError) as exc_info:
        token_service.verify_access("not-a-jwt")

    assert exc_info.value.kind == TokenErrorKind.invalid


def test_identical_secrets_rejected():
    with pytest.raises(ValueError):
        JwtTokenService(
            access_secret="same",
            refresh_secret="same",
            issuer="videogen-api",
            audience="videogen-client",
        )
