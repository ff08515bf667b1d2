"""Indexed, ordered store of doclets."""

from collections.abc import Iterable, Iterator
from typing import Protocol

from relation_fixer.doclet import Doclet


class DocletStore(Protocol):
    """Read-only view of a doclet store, as consumed by the resolver."""

    def get_by_memberof(self, longname: str) -> list[Doclet]:
        """Return the doclets declared directly under `longname`."""
        ...

    def get_all(self) -> list[Doclet]:
        """Return every doclet in store order."""
        ...


class DocletCollection:
    """Keeps doclets in insertion order, indexed by `memberof`."""

    def __init__(self, doclets: Iterable[Doclet] = ()) -> None:
        """Initialize the collection, adding the given doclets in order."""
        self._all: list[Doclet] = []
        self._by_memberof: dict[str, list[Doclet]] = {}
        for doclet in doclets:
            self.add(doclet)

    def add(self, doclet: Doclet) -> None:
        """Append a doclet."""
        self._all.append(doclet)
        if doclet.memberof:
            self._by_memberof.setdefault(doclet.memberof, []).append(doclet)

    def get_by_memberof(self, longname: str) -> list[Doclet]:
        """Return the doclets declared directly under `longname`."""
        return list(self._by_memberof.get(longname, []))

    def get_all(self) -> list[Doclet]:
        """Return every doclet in insertion order."""
        return list(self._all)

    def __len__(self) -> int:
        return len(self._all)

    def __iter__(self) -> Iterator[Doclet]:
        return iter(self._all)
