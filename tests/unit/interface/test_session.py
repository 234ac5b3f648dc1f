"""Unit tests for bearer session extraction."""

from uuid import uuid4

import pytest

from roster.config import AuthSettings
from roster.domain.error import AuthenticationError
from roster.domain.service import JWTService
from roster.domain.value import IdentityId
from roster.interface.api.session import bearer_token, require_session


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="session-test-secret-at-least-32-bytes"))


class TestBearerToken:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc", "abc"),
            ("bearer  abc ", "abc"),
            ("Basic abc", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parses_header(self, header, expected):
        assert bearer_token(header) == expected


class TestRequireSession:
    """Tests for building sessions from headers."""

    def test_valid_token(self, jwt_service):
        identity_id = IdentityId(uuid4())
        token = jwt_service.create_token(identity_id, "jane@example.org")

        session = require_session(f"Bearer {token}", jwt_service)

        assert session.identity_id == identity_id
        assert session.email == "jane@example.org"

    def test_missing_header(self, jwt_service):
        with pytest.raises(AuthenticationError):
            require_session(None, jwt_service)

    def test_invalid_token(self, jwt_service):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            require_session("Bearer forged", jwt_service)
