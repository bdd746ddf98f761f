"""Tests for attribute type resolution."""
import pytest

from umlgen.generators.spring_gen.type_resolver import (
    TYPE_SYNONYMS,
    collect_imports,
    is_type_like,
    resolve_type,
)
from umlgen.generators.spring_gen.types import CanonicalType


@pytest.mark.parametrize("token, expected", [
    ("int", CanonicalType.INTEGER),
    ("Int", CanonicalType.INTEGER),
    ("integer", CanonicalType.INTEGER),
    ("INT", CanonicalType.INTEGER),
    (" long ", CanonicalType.LONG),
    ("string", CanonicalType.TEXT),
    ("text", CanonicalType.TEXT),
    ("double", CanonicalType.DOUBLE),
    ("float", CanonicalType.FLOAT),
    ("decimal", CanonicalType.DECIMAL),
    ("money", CanonicalType.DECIMAL),
    ("currency", CanonicalType.DECIMAL),
    ("BigDecimal", CanonicalType.DECIMAL),
    ("bool", CanonicalType.BOOLEAN),
    ("boolean", CanonicalType.BOOLEAN),
    ("date", CanonicalType.DATE),
    ("datetime", CanonicalType.DATE_TIME),
    ("timestamp", CanonicalType.DATE_TIME),
    ("TimeStamp", CanonicalType.DATE_TIME),
    ("uuid", CanonicalType.UUID),
    ("guid", CanonicalType.UUID),
])
def test_resolve_known_tokens(token, expected):
    """Synonyms resolve to their canonical type, case-insensitively as a fallback."""
    assert resolve_type(token) == expected, f"{token!r} should resolve to {expected.value}"


@pytest.mark.parametrize("token", ["Customer", "List<String>", "", "   ", None, "???"])
def test_unknown_tokens_default_to_text(token):
    """Unrecognized tokens are not an error; they fall back to String."""
    assert resolve_type(token) == CanonicalType.TEXT


def test_synonym_table_is_immutable():
    with pytest.raises(TypeError):
        TYPE_SYNONYMS["custom"] = CanonicalType.LONG


def test_is_type_like():
    assert is_type_like("int")
    assert is_type_like("boolean")
    assert is_type_like("BigDecimal")
    assert is_type_like("Customer")
    assert not is_type_like("name")
    assert not is_type_like("first-name")


def test_collect_imports_only_for_library_types():
    imports = collect_imports([CanonicalType.DECIMAL, CanonicalType.TEXT, CanonicalType.DATE, CanonicalType.DECIMAL])
    assert imports == {"import java.math.BigDecimal;", "import java.time.LocalDate;"}
    assert collect_imports([CanonicalType.INTEGER, CanonicalType.BOOLEAN]) == set()
