"""Lookups over the precomputed ancestor closure and descendant index."""

from collections.abc import Iterable

from relation_fixer.doclet import Doclet
from relation_fixer.relation_kind import RelationKind

_RELATION_ATTRS = {
    RelationKind.EXTENDS: "augments_nested",
    RelationKind.MIXES: "mixes_nested",
    RelationKind.IMPLEMENTS: "implements_nested",
}


class RelationIndex:
    """Holds the relation closures computed before doclets are fixed.

    No traversal happens here: every list is read as-is from the doclets.
    """

    def __init__(
        self,
        ancestor_closure: dict[str, dict[RelationKind, list[str]]],
        descendant_index: dict[str, list[str]],
    ) -> None:
        """Initialize from explicit closure maps keyed by longname."""
        self.ancestor_closure = ancestor_closure
        self.descendant_index = descendant_index

    @classmethod
    def from_doclets(cls, doclets: Iterable[Doclet]) -> "RelationIndex":
        """Read the closures carried by the doclets; the first longname wins."""
        ancestor_closure: dict[str, dict[RelationKind, list[str]]] = {}
        descendant_index: dict[str, list[str]] = {}
        for doclet in doclets:
            if doclet.longname in ancestor_closure:
                continue
            ancestor_closure[doclet.longname] = {
                kind: list(getattr(doclet, attr))
                for kind, attr in _RELATION_ATTRS.items()
            }
            descendant_index[doclet.longname] = list(doclet.descendants)
        return cls(ancestor_closure, descendant_index)

    def ancestors(self, longname: str, kind: RelationKind) -> list[str]:
        """Return ancestor longnames of `longname` for the relation kind."""
        return self.ancestor_closure.get(longname, {}).get(kind, [])

    def ancestors_of(self, doclet: Doclet, kind: RelationKind) -> list[str]:
        """Like `ancestors`, reading the doclet itself when it is not indexed."""
        if doclet.longname in self.ancestor_closure:
            return self.ancestors(doclet.longname, kind)
        return list(getattr(doclet, _RELATION_ATTRS[kind]))

    def descendants(self, longname: str) -> list[str]:
        """Return longnames of entities that relate back to `longname`."""
        return self.descendant_index.get(longname, [])
