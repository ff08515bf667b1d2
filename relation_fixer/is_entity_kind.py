"""Predicate for checking if a doclet can receive inherited members."""

from collections.abc import Collection

ENTITY_KINDS = frozenset({"class", "interface", "mixin"})


def is_entity_kind(kind: str, entity_kinds: Collection[str] = ENTITY_KINDS) -> bool:
    """Check if the kind represents a class, interface or mixin."""
    return kind.lower() in entity_kinds
