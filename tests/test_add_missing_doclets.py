"""Tests for running the resolver over a whole doclet dump."""

import pytest

from relation_fixer.add_missing_doclets import (
    add_missing_doclets,
    apply_missing_doclets,
)
from relation_fixer.doclet import Doclet
from relation_fixer.fix_report import FixReport
from relation_fixer.load_config import load_config
from relation_fixer.validation import ValidationError


def _zoo() -> list[Doclet]:
    """Animal with a static and an instance member, Dog extending and mixing."""
    return [
        Doclet(longname="Animal", name="Animal", kind="class", descendants=["Dog"]),
        Doclet(
            longname="Animal.create",
            name="create",
            kind="function",
            memberof="Animal",
            scope="static",
        ),
        Doclet(
            longname="Animal#speak",
            name="speak",
            kind="function",
            memberof="Animal",
            scope="instance",
        ),
        Doclet(longname="Emitter", name="Emitter", kind="mixin", descendants=["Dog"]),
        Doclet(
            longname="Emitter#fire",
            name="fire",
            kind="function",
            memberof="Emitter",
            scope="instance",
        ),
        Doclet(
            longname="Dog",
            name="Dog",
            kind="class",
            augments_nested=["Animal"],
            mixes_nested=["Emitter"],
        ),
    ]


def test_default_passes() -> None:
    """Verify statics are inherited and mixin members are mixed by default."""
    doclets = _zoo()
    fixed = add_missing_doclets(doclets, load_config(None))

    by_longname = {d.longname: d for d in fixed}
    assert by_longname["Dog.create"].inherited is True
    assert by_longname["Dog#fire"].mixed is True
    # Instance members of parent classes are left to JSDoc itself.
    assert "Dog#speak" not in by_longname
    assert fixed[: len(doclets)] == doclets


def test_ignored_doclets_are_marked_not_mutated() -> None:
    """Verify that superseded doclets are marked ignored on copies."""
    explicit = Doclet(
        longname="Dog.create",
        name="create",
        kind="function",
        memberof="Dog",
        scope="static",
        inheritdoc="",
    )
    doclets = [*_zoo(), explicit]
    fixed = add_missing_doclets(doclets, load_config(None))

    creates = [d for d in fixed if d.longname == "Dog.create"]
    assert len(creates) == 2
    assert creates[0].ignore is True
    assert creates[0].inheritdoc == ""
    assert creates[1].ignore is False
    assert creates[1].inherited is True
    assert explicit.ignore is False


def test_drop_ignored() -> None:
    """Verify that `drop_ignored` removes superseded doclets."""
    explicit = Doclet(
        longname="Dog.create",
        name="create",
        kind="function",
        memberof="Dog",
        scope="static",
        overrides="Animal.create",
    )
    config = load_config(None)
    config["drop_ignored"] = True
    fixed = add_missing_doclets([*_zoo(), explicit], config)

    creates = [d for d in fixed if d.longname == "Dog.create"]
    assert len(creates) == 1
    assert creates[0].overrides is None
    assert creates[0].inherited is True


def test_report_collects_results() -> None:
    """Verify that each changing pass is recorded in the report."""
    report = FixReport("hash")
    add_missing_doclets(_zoo(), load_config(None), report)

    entries = [(e.entity, e.relation, e.added) for e in report.entries]
    assert entries == [
        ("Dog", "augmentsNested", ["Dog.create"]),
        ("Dog", "mixesNested", ["Dog#fire"]),
    ]


def test_strict_rejects_duplicates() -> None:
    """Verify that strict mode validates the dump before fixing."""
    config = load_config(None)
    config["strict"] = True
    with pytest.raises(ValidationError):
        add_missing_doclets([*_zoo(), Doclet(longname="Dog", kind="class")], config)


def test_apply_deduplicates_new_doclets() -> None:
    """Verify that new doclets reached through several ancestors appear once."""
    first = Doclet(longname="Dog#speak", raw={"description": "first"})
    second = Doclet(longname="Dog#speak", raw={"description": "second"})
    out = apply_missing_doclets([], [first, second], [])
    assert out == [first]


def test_strict_accepts_module_dump() -> None:
    """Verify that strict mode fixes a dump of classes declared in a module."""
    doclets = [
        Doclet(longname="module:zoo", name="zoo", kind="module"),
        Doclet(
            longname="module:zoo~Animal",
            name="Animal",
            kind="class",
            memberof="module:zoo",
            scope="inner",
        ),
        Doclet(
            longname="module:zoo~Animal.create",
            name="create",
            kind="function",
            memberof="module:zoo~Animal",
            scope="static",
        ),
        Doclet(
            longname="module:zoo~Dog",
            name="Dog",
            kind="class",
            memberof="module:zoo",
            scope="inner",
            augments_nested=["module:zoo~Animal"],
        ),
    ]
    config = load_config(None)
    config["strict"] = True
    fixed = add_missing_doclets(doclets, config)

    assert fixed[-1].longname == "module:zoo~Dog.create"
    assert fixed[-1].inherited is True
