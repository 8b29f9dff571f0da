"""Unit tests for TokenIssuer."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from social.config import AuthSettings
from social.domain.service import AccessClaims, RefreshClaims, TokenIssuer
from social.domain.value import RefreshTokenId, UserId
from social.util.jwt import TokenVerifyError


@pytest.fixture
def issuer(auth_settings: AuthSettings) -> TokenIssuer:
    return TokenIssuer(auth_settings)


def _sign(payload: dict, settings: AuthSettings) -> str:
    return jwt.encode(payload, settings.token_secret, algorithm=settings.token_algorithm)


def _decode(token: str, settings: AuthSettings) -> dict:
    return jwt.decode(
        token,
        settings.token_secret,
        algorithms=[settings.token_algorithm],
        options={"verify_sub": False},
    )


class TestIssuePair:
    """Tests for TokenIssuer.issue_pair()."""

    def test_access_token_subject_is_user_id(self, issuer, auth_settings):
        user_id = UserId(uuid4())

        pair = issuer.issue_pair(user_id, RefreshTokenId(uuid4()))

        claims = _decode(pair.access, auth_settings)
        assert claims["sub"] == str(user_id)
        assert set(claims) == {"sub", "exp"}

    def test_refresh_token_subject_is_user_and_token_id(self, issuer, auth_settings):
        user_id = UserId(uuid4())
        token_id = RefreshTokenId(uuid4())

        pair = issuer.issue_pair(user_id, token_id)

        claims = _decode(pair.refresh, auth_settings)
        assert claims["sub"] == [str(user_id), str(token_id)]
        assert set(claims) == {"sub", "exp"}

    def test_lifetimes_follow_settings(self, issuer, auth_settings):
        now = datetime.now(timezone.utc).timestamp()

        pair = issuer.issue_pair(UserId(uuid4()), RefreshTokenId(uuid4()))

        access_exp = _decode(pair.access, auth_settings)["exp"]
        refresh_exp = _decode(pair.refresh, auth_settings)["exp"]
        assert access_exp == pytest.approx(now + 15 * 60, abs=5)
        assert refresh_exp == pytest.approx(now + 30 * 24 * 3600, abs=5)

    def test_tokens_are_signed_with_configured_algorithm(self, issuer):
        pair = issuer.issue_pair(UserId(uuid4()), RefreshTokenId(uuid4()))

        assert jwt.get_unverified_header(pair.access)["alg"] == "HS256"


class TestVerifyAccessToken:
    """Tests for TokenIssuer.verify_access_token()."""

    def test_round_trip(self, issuer):
        user_id = UserId(uuid4())
        pair = issuer.issue_pair(user_id, RefreshTokenId(uuid4()))

        assert issuer.verify_access_token(pair.access) == AccessClaims(user_id=user_id)

    def test_refresh_token_is_not_an_access_token(self, issuer):
        pair = issuer.issue_pair(UserId(uuid4()), RefreshTokenId(uuid4()))

        assert isinstance(issuer.verify_access_token(pair.refresh), TokenVerifyError)

    def test_expired_token_is_rejected(self, issuer, auth_settings):
        token = _sign(
            {
                "sub": str(uuid4()),
                "exp": datetime.now(timezone.utc) - timedelta(seconds=10),
            },
            auth_settings,
        )

        result = issuer.verify_access_token(token)

        assert isinstance(result, TokenVerifyError)
        assert "expired" in result.reason

    def test_wrong_secret_is_rejected(self, issuer, auth_settings):
        other = AuthSettings(token_secret="another-secret-0123456789abcdef0123")
        pair = TokenIssuer(other).issue_pair(UserId(uuid4()), RefreshTokenId(uuid4()))

        assert isinstance(issuer.verify_access_token(pair.access), TokenVerifyError)

    def test_garbage_is_rejected(self, issuer):
        assert isinstance(issuer.verify_access_token("not-a-jwt"), TokenVerifyError)

    def test_token_without_exp_is_rejected(self, issuer, auth_settings):
        token = _sign({"sub": str(uuid4())}, auth_settings)

        assert isinstance(issuer.verify_access_token(token), TokenVerifyError)


class TestVerifyRefreshToken:
    """Tests for TokenIssuer.verify_refresh_token()."""

    def test_round_trip(self, issuer):
        user_id = UserId(uuid4())
        token_id = RefreshTokenId(uuid4())
        pair = issuer.issue_pair(user_id, token_id)

        assert issuer.verify_refresh_token(pair.refresh) == RefreshClaims(
            user_id=user_id, token_id=token_id
        )

    def test_string_subject_is_rejected(self, issuer):
        """An access token (string subject) must not pass as a refresh token."""
        pair = issuer.issue_pair(UserId(uuid4()), RefreshTokenId(uuid4()))

        assert isinstance(issuer.verify_refresh_token(pair.access), TokenVerifyError)

    @pytest.mark.parametrize(
        "subject",
        [
            [],
            ["only-one"],
            [str(uuid4()), str(uuid4()), str(uuid4())],
            [str(uuid4()), "not-a-uuid"],
            [str(uuid4()), 42],
            {"user": str(uuid4())},
        ],
    )
    def test_malformed_subject_is_rejected(self, issuer, auth_settings, subject):
        token = _sign(
            {"sub": subject, "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            auth_settings,
        )

        assert isinstance(issuer.verify_refresh_token(token), TokenVerifyError)

    def test_expired_refresh_token_is_rejected(self, issuer, auth_settings):
        token = _sign(
            {
                "sub": [str(uuid4()), str(uuid4())],
                "exp": datetime.now(timezone.utc) - timedelta(seconds=1),
            },
            auth_settings,
        )

        assert isinstance(issuer.verify_refresh_token(token), TokenVerifyError)
