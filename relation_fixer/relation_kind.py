"""Relation kinds between a documented entity and its ancestors."""

from enum import Enum


class RelationKind(Enum):
    """Relation kind, valued by the doclet field holding its ancestor closure."""

    EXTENDS = "augmentsNested"
    MIXES = "mixesNested"
    IMPLEMENTS = "implementsNested"

    @classmethod
    def parse(cls, value: "str | RelationKind") -> "RelationKind":
        """Accept a member, its name (`extends`) or its field (`augmentsNested`)."""
        if isinstance(value, RelationKind):
            return value
        if isinstance(value, str):
            for kind in cls:
                if value == kind.value or value.upper() == kind.name:
                    return kind
        msg = f"Unknown relation kind: {value!r}"
        raise ValueError(msg)
