"""Unit tests for domain enums."""

import pytest

from bindery.domain.enums import BindingKind
from bindery.domain.exceptions import UnknownKindError


class TestBindingKindEnum:
    """Test cases for the BindingKind enum."""

    def test_kind_values(self):
        """Test that every kind has the correct string value."""
        assert BindingKind.CLASS.value == "class"
        assert BindingKind.SINGLETON.value == "singleton"
        assert BindingKind.FACTORY.value == "factory"

    def test_kind_from_value(self):
        """Test that a kind can be created from its string value."""
        assert BindingKind("class") == BindingKind.CLASS
        assert BindingKind("singleton") == BindingKind.SINGLETON
        assert BindingKind("factory") == BindingKind.FACTORY

    def test_kind_enum_members(self):
        """Test that the enum has exactly three members."""
        assert len(BindingKind) == 3
        assert {kind.value for kind in BindingKind} == {"class", "singleton", "factory"}

    def test_kind_is_string(self):
        """Test that kinds compare equal to their string values."""
        assert BindingKind.SINGLETON == "singleton"
        assert str(BindingKind.FACTORY) == "factory"


class TestBindingKindParse:
    """Test cases for BindingKind.parse."""

    def test_parse_member_returns_member(self):
        """Test that parsing a member returns it unchanged."""
        assert BindingKind.parse(BindingKind.CLASS) is BindingKind.CLASS

    def test_parse_string(self):
        """Test that parsing a string value returns the member."""
        assert BindingKind.parse("singleton") is BindingKind.SINGLETON

    @pytest.mark.parametrize("kind", ["transient", "Singleton", "", None, 3])
    def test_parse_invalid_raises_unknown_kind(self, kind):
        """Test that parsing an unknown value raises UnknownKindError."""
        with pytest.raises(UnknownKindError) as exc_info:
            BindingKind.parse(kind)

        assert exc_info.value.kind == kind
