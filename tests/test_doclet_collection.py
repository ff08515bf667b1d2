"""Tests for the doclet collection."""

from relation_fixer.doclet import Doclet
from relation_fixer.doclet_collection import DocletCollection


def test_get_by_memberof_keeps_order() -> None:
    """Verify that members are returned in insertion order."""
    a = Doclet(longname="Dog#a", memberof="Dog")
    b = Doclet(longname="Dog#b", memberof="Dog")
    other = Doclet(longname="Cat#a", memberof="Cat")
    collection = DocletCollection([a, other, b])

    assert collection.get_by_memberof("Dog") == [a, b]
    assert collection.get_by_memberof("Cat") == [other]
    assert collection.get_by_memberof("Nope") == []


def test_returned_lists_are_copies() -> None:
    """Verify that callers cannot alter the index through returned lists."""
    collection = DocletCollection([Doclet(longname="Dog#a", memberof="Dog")])
    collection.get_by_memberof("Dog").clear()
    collection.get_all().clear()
    assert len(collection.get_by_memberof("Dog")) == 1
    assert len(collection) == 1


def test_add_keeps_duplicates_in_order() -> None:
    """Verify that doclets sharing a longname are all kept, in order."""
    first = Doclet(longname="Dog", kind="class")
    second = Doclet(longname="Dog", kind="interface")
    collection = DocletCollection()
    collection.add(first)
    collection.add(second)

    assert list(collection) == [first, second]
