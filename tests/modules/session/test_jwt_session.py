from datetime import datetime, timedelta, timezone

import jwt
import pytest

from authgate.modules.session import JwtSession


SECRET = "test-secret-key-for-testing-only"


class TestJwtSession:
    @pytest.fixture
    def session(self):
        return JwtSession(secret=SECRET)

    def test_no_token(self, session):
        """Without a token there's no user."""
        assert session.token is None
        assert session.get_info().user is None

    def test_persist_and_read(self, session):
        """Persisted auth info should be readable from the token."""
        timestamp = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
        session.persist("42", "org-1", "abc", timestamp)

        assert session.token is not None
        info = session.get_info()
        assert info.user == "42"
        assert info.context == "org-1"
        assert info.checksum == "abc"
        assert info.timestamp == timestamp

    def test_persist_without_timestamp(self, session):
        """Without timestamp the info has no timestamp."""
        session.persist("42", None, "abc", None)
        assert session.get_info().timestamp is None

    def test_timestamp_with_microseconds(self, session):
        """The login time is reproduced exactly, including microseconds."""
        timestamp = datetime(2024, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        session.persist("42", None, "abc", timestamp)

        assert session.get_info().timestamp == timestamp

    def test_unix_timestamp_claim(self):
        """A numeric ts claim is read as unix time."""
        token = jwt.encode({"user": "7", "ts": 1700000000}, SECRET, algorithm="HS256")
        info = JwtSession(token=token, secret=SECRET).get_info()

        assert info.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_claims(self, session):
        """The token should be a JWT signed with the secret."""
        session.persist("42", None, "abc", None)
        claims = jwt.decode(session.token, SECRET, algorithms=["HS256"])

        assert claims["user"] == "42"
        assert claims["checksum"] == "abc"
        assert claims["exp"] - claims["iat"] == 86400

    def test_with_ttl(self, session):
        session = session.with_ttl(60)
        session.persist("42", None, "abc", None)
        claims = jwt.decode(session.token, SECRET, algorithms=["HS256"])

        assert claims["exp"] - claims["iat"] == 60

    def test_clear(self, session):
        session.persist("42", None, "abc", None)
        session.clear()

        assert session.token is None
        assert session.get_info().user is None

    def test_wrong_secret(self, session):
        """A token signed with another secret is ignored."""
        token = jwt.encode({"user": "42"}, "another-secret-key-for-testing-only", algorithm="HS256")
        assert session.with_token(token).get_info().user is None

    def test_expired_token(self, session):
        """An expired token is ignored."""
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"user": "42", "checksum": "abc", "exp": now - timedelta(minutes=1)},
            SECRET,
            algorithm="HS256",
        )
        assert session.with_token(token).get_info().user is None

    def test_malformed_token(self, session):
        assert session.with_token("not-a-jwt").get_info().user is None

    def test_with_token(self, session):
        """with_token should return a copy holding the other token."""
        token = jwt.encode({"user": "7", "checksum": "x"}, SECRET, algorithm="HS256")
        other = session.with_token(token)

        assert other.get_info().user == "7"
        assert session.token is None

    def test_settings(self, monkeypatch):
        """Secret and ttl can come from settings."""
        monkeypatch.setenv("AUTH_JWT_SECRET", SECRET)
        monkeypatch.setenv("AUTH_JWT_TTL", "120")
        session = JwtSession()
        session.persist("42", None, "abc", None)

        claims = jwt.decode(session.token, SECRET, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 120
