"""Tests for domain entities."""

import pytest

from snippet_manager.domain.entities import (
    Identity,
    ReviewStatus,
    Snippet,
    SnippetStatus,
    code_key,
)


class TestSnippet:
    """Test Snippet entity."""

    def test_snippet_creation(self):
        snippet = Snippet(name="sum", language="printscript", author="alice@x.com")

        assert snippet.id is None
        assert snippet.name == "sum"
        assert snippet.language == "printscript"
        assert snippet.author == "alice@x.com"

    @pytest.mark.parametrize("field", ["name", "language", "author"])
    def test_snippet_requires_fields(self, field):
        values = {"name": "sum", "language": "printscript", "author": "alice@x.com"}
        values[field] = ""

        with pytest.raises(ValueError, match=f"{field} is required"):
            Snippet(**values)

    def test_code_key_is_stable_id(self):
        snippet = Snippet(id=42, name="sum", language="printscript", author="a@x.com")

        assert snippet.code_key == "42"
        assert code_key(42) == snippet.code_key

    def test_code_key_requires_id(self):
        snippet = Snippet(name="sum", language="printscript", author="a@x.com")

        with pytest.raises(ValueError, match="no id"):
            _ = snippet.code_key


class TestSnippetStatus:
    """Test SnippetStatus entity."""

    def test_defaults_to_pending(self):
        status = SnippetStatus(snippet_id=1, user_email="alice@x.com")

        assert status.status == ReviewStatus.PENDING
        assert status.is_pending()

    def test_mark_pending_resets_terminal_state(self):
        status = SnippetStatus(
            snippet_id=1,
            user_email="alice@x.com",
            status=ReviewStatus.NOT_COMPLIANT,
        )
        before = status.updated_at

        status.mark_pending()

        assert status.status == ReviewStatus.PENDING
        assert status.updated_at >= before

    def test_requires_user_email(self):
        with pytest.raises(ValueError, match="user_email is required"):
            SnippetStatus(snippet_id=1, user_email="")


class TestIdentity:
    """Test Identity value object."""

    def test_identity_is_frozen(self):
        identity = Identity(email="alice@x.com")

        with pytest.raises(AttributeError):
            identity.email = "bob@x.com"

    def test_identity_requires_email(self):
        with pytest.raises(ValueError, match="email is required"):
            Identity(email="")
