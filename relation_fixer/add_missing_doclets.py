"""Orchestration of the resolver over every entity of a doclet dump."""

import dataclasses
import logging
from typing import Any

from relation_fixer.doclet import Doclet
from relation_fixer.doclet_collection import DocletCollection
from relation_fixer.fix_report import FixReport
from relation_fixer.inheritance_resolver import DocletInheritanceResolver
from relation_fixer.is_entity_kind import is_entity_kind
from relation_fixer.load_config import resolve_passes
from relation_fixer.validation import validate_doclets

logger = logging.getLogger(__name__)


def add_missing_doclets(
    doclets: list[Doclet],
    config: dict[str, Any],
    report: FixReport | None = None,
) -> list[Doclet]:
    """Add inherited, mixed and implemented members to every entity.

    All passes resolve against the original doclets, so members synthesized for
    one entity are not seen by another within the same run.
    """
    if config.get("strict"):
        validate_doclets(doclets)

    collection = DocletCollection(doclets)
    resolver = DocletInheritanceResolver(collection, strict=bool(config.get("strict")))
    passes = resolve_passes(config)
    entity_kinds = set(config.get("entity_kinds", []))

    new_doclets: list[Doclet] = []
    ignored_doclets: list[Doclet] = []
    for entity in collection:
        if not is_entity_kind(entity.kind, entity_kinds):
            continue
        for options in passes:
            result = resolver.resolve(entity, options)
            new_doclets.extend(result.new_doclets)
            ignored_doclets.extend(result.ignored_doclets)
            if report is not None:
                report.add_result(entity.longname, options.relation, result)

    fixed = apply_missing_doclets(
        doclets,
        new_doclets,
        ignored_doclets,
        drop_ignored=bool(config.get("drop_ignored")),
    )
    logger.info(
        "Relation fixing: %d doclets in, %d out",
        len(doclets),
        len(fixed),
    )
    return fixed


def apply_missing_doclets(
    doclets: list[Doclet],
    new_doclets: list[Doclet],
    ignored_doclets: list[Doclet],
    *,
    drop_ignored: bool = False,
) -> list[Doclet]:
    """Return `doclets` with ignored ones marked (or dropped) plus new ones.

    New doclets are de-duplicated by longname, first one wins. The inputs are
    not modified.
    """
    ignored_ids = {id(d) for d in ignored_doclets}
    out: list[Doclet] = []
    for doclet in doclets:
        if id(doclet) not in ignored_ids:
            out.append(doclet)
        elif not drop_ignored:
            out.append(dataclasses.replace(doclet, ignore=True))

    seen: set[str] = set()
    for doclet in new_doclets:
        if doclet.longname in seen:
            continue
        seen.add(doclet.longname)
        out.append(doclet)

    logger.info(
        "Added %d doclets, ignored %d",
        len(seen),
        len(ignored_ids),
    )
    return out
