"""Tests for parsing relation kinds."""

import pytest

from relation_fixer.relation_kind import RelationKind


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("augmentsNested", RelationKind.EXTENDS),
        ("extends", RelationKind.EXTENDS),
        ("MIXES", RelationKind.MIXES),
        ("implementsNested", RelationKind.IMPLEMENTS),
        (RelationKind.IMPLEMENTS, RelationKind.IMPLEMENTS),
    ],
)
def test_parse(value: str, expected: RelationKind) -> None:
    """Verify that kinds parse from their name or their doclet field."""
    assert RelationKind.parse(value) is expected


def test_parse_unknown() -> None:
    """Verify that unknown kinds raise ValueError."""
    with pytest.raises(ValueError, match="borrows"):
        RelationKind.parse("borrows")


def test_parse_non_string() -> None:
    """Verify that non-string values from YAML raise ValueError."""
    with pytest.raises(ValueError, match="Unknown relation kind"):
        RelationKind.parse(1)  # type: ignore[arg-type]
