"""Options for a single resolver pass."""

from dataclasses import dataclass, field
from typing import Any

from relation_fixer.relation_kind import RelationKind


@dataclass(frozen=True)
class ResolveOptions:
    """Relation to follow and which ancestor members to propagate."""

    relation: RelationKind
    filter: dict[str, Any] = field(default_factory=dict)  # field -> expected value
    only_implicitly_inherited: bool = False

    @classmethod
    def from_config(cls, entry: dict[str, Any]) -> "ResolveOptions":
        """Build options from one `passes` entry of the configuration."""
        return cls(
            relation=RelationKind.parse(entry["relation"]),
            filter=dict(entry.get("filter") or {}),
            only_implicitly_inherited=bool(
                entry.get("only_implicitly_inherited", False)
            ),
        )
