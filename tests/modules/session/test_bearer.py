import pytest

from authgate.modules.session import BearerSession, SessionReadOnlyError
from authgate.shared.exceptions import LogicError


class TestBearerSession:
    def test_no_header(self):
        """Without a header there's no user."""
        assert BearerSession().get_info().user is None

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer", "Bearer    ", "abc"])
    def test_not_bearer(self, header):
        """Other authorization schemes and empty keys are ignored."""
        info = BearerSession(header).get_info()
        assert info.user is None
        assert info.checksum is None

    def test_bearer(self):
        """The key is used as user reference, with an empty checksum."""
        info = BearerSession("Bearer abc123").get_info()
        assert info.user == "abc123"
        assert info.checksum == ""
        assert info.context is None

    def test_bearer_case_insensitive(self):
        assert BearerSession("bearer abc123").get_info().user == "abc123"

    def test_id_format(self):
        """The key can be formatted to a user reference."""
        info = BearerSession("Bearer abc123", id_format="key:{}").get_info()
        assert info.user == "key:abc123"

    def test_id_format_from_settings(self, monkeypatch):
        monkeypatch.setenv("AUTH_BEARER_ID_FORMAT", "api/{}")
        assert BearerSession("Bearer xyz").get_info().user == "api/xyz"

    def test_for_header(self):
        """for_header should return a copy for another request."""
        session = BearerSession("Bearer one")
        other = session.for_header("Bearer two")

        assert other.get_info().user == "two"
        assert session.get_info().user == "one"

    def test_persist(self):
        """Auth info can't be written to a bearer header."""
        with pytest.raises(SessionReadOnlyError) as exc_info:
            BearerSession("Bearer abc").persist("1", None, "", None)
        assert isinstance(exc_info.value, LogicError)
        assert exc_info.value.code == "SESSION_READ_ONLY"

    def test_clear(self):
        with pytest.raises(SessionReadOnlyError):
            BearerSession("Bearer abc").clear()

    def test_not_trusted_by_default(self):
        """The checksum is compared unless the session is trusted."""
        assert BearerSession("Bearer abc").get_info().trusted is False

    def test_trusted(self):
        """A trusted session skips the checksum comparison."""
        session = BearerSession("Bearer abc", trusted=True)

        assert session.get_info().trusted is True
        assert session.for_header("Bearer def").get_info().trusted is True
