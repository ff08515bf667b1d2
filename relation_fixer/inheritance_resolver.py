"""Logic for finding the doclets an entity is missing from its ancestors."""

import copy
import logging

from relation_fixer.doclet import Doclet
from relation_fixer.doclet_collection import DocletStore
from relation_fixer.longname_for_new_doclet import longname_for_new_doclet
from relation_fixer.missing_doclets_data import MissingDocletsData
from relation_fixer.relation_index import RelationIndex
from relation_fixer.relation_kind import RelationKind
from relation_fixer.resolve_options import ResolveOptions

logger = logging.getLogger(__name__)


class DocletInheritanceResolver:
    """Synthesizes inherited/mixed member doclets for classes, interfaces and mixins.

    Doclets must already carry closed relation arrays (`augmentsNested`,
    `mixesNested`, `implementsNested`, `descendants`). The store is only read;
    the caller inserts `new_doclets` and marks `ignored_doclets`.

    Without an explicit `relation_index`, one is read from the store on every
    `resolve` call, so doclets added to the store in between are seen.
    """

    def __init__(
        self,
        store: DocletStore,
        relation_index: RelationIndex | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize the resolver over a doclet store."""
        self.store = store
        self.relation_index = relation_index
        self.strict = strict

    def resolve(self, entity: Doclet, options: ResolveOptions) -> MissingDocletsData:
        """Return doclets to add to `entity` and existing doclets to ignore."""
        result = MissingDocletsData()

        doclets = self.store.get_all()
        relation_index = self.relation_index or RelationIndex.from_doclets(doclets)

        candidates = self._collect_candidates(relation_index, entity, options)
        if not candidates:
            return result

        doclet_map = _create_doclet_map(doclets)

        for candidate in candidates:
            cloned = copy.deepcopy(candidate)
            cloned.longname = longname_for_new_doclet(
                candidate.longname, entity.longname, strict=self.strict
            )
            cloned.memberof = entity.longname

            tag = _relation_tag(
                relation_index, doclet_map, entity, candidate, options.relation
            )
            if tag:
                cloned.set_relation_tag(tag)

            same_member = [
                d
                for d in self.store.get_by_memberof(entity.longname)
                if d.name == cloned.name and d.kind == cloned.kind
            ]

            if not same_member:
                result.new_doclets.append(cloned)
            elif (
                _all_explicitly_inherit(same_member)
                and not options.only_implicitly_inherited
            ):
                # Every existing declaration used inheritdoc/overrides:
                # replace them with the synthesized doclet.
                result.ignored_doclets.extend(same_member)
                result.new_doclets.append(cloned)
            elif len(same_member) >= 2:
                # Declared through several ancestor chains: keep the first.
                correct = copy.deepcopy(same_member[0])
                if tag:
                    correct.set_relation_tag(tag)
                result.ignored_doclets.extend(same_member)
                result.new_doclets.append(correct)

        logger.debug(
            "%s (%s): %d new, %d ignored",
            entity.longname,
            options.relation.value,
            len(result.new_doclets),
            len(result.ignored_doclets),
        )
        return result

    def _collect_candidates(
        self,
        relation_index: RelationIndex,
        entity: Doclet,
        options: ResolveOptions,
    ) -> list[Doclet]:
        """Gather propagatable members of every related ancestor, in order."""
        candidates: list[Doclet] = []
        for ancestor in relation_index.ancestors_of(entity, options.relation):
            candidates.extend(
                d
                for d in self.store.get_by_memberof(ancestor)
                if _should_propagate(d, options)
            )
        return candidates


def _create_doclet_map(doclets: list[Doclet]) -> dict[str, Doclet]:
    """Map longnames to doclets; the first occurrence wins."""
    doclet_map: dict[str, Doclet] = {}
    for doclet in doclets:
        doclet_map.setdefault(doclet.longname, doclet)
    return doclet_map


def _relation_tag(
    relation_index: RelationIndex,
    doclet_map: dict[str, Doclet],
    entity: Doclet,
    member: Doclet,
    relation: RelationKind,
) -> str | None:
    """Return `inherited`, `mixed` or None for a member copied onto `entity`."""
    if relation is RelationKind.EXTENDS:
        return "inherited"
    if relation is RelationKind.MIXES:
        return "mixed"

    parent = doclet_map.get(member.memberof or "")
    if parent is None:
        return None

    is_mixed = False
    is_inherited = False
    for longname in relation_index.descendants(parent.longname):
        descendant = doclet_map.get(longname)
        if descendant is None:
            continue
        reaches_entity = entity.longname in relation_index.descendants(longname)
        if descendant.kind == "mixin" and reaches_entity:
            is_mixed = True
        elif descendant.kind == "class" and reaches_entity:
            is_inherited = True

    if is_mixed:
        return "mixed"
    if is_inherited:
        return "inherited"
    return None


def _should_propagate(doclet: Doclet, options: ResolveOptions) -> bool:
    """Skip ignored, undocumented and re-pointing members, then apply the filter."""
    if doclet.ignore or doclet.undocumented or doclet.inheritdoc:
        return False
    return all(doclet.get(key) == value for key, value in options.filter.items())


def _all_explicitly_inherit(doclets: list[Doclet]) -> bool:
    """Whether every doclet carries an `inheritdoc` or `overrides` marker."""
    return all(d.inheritdoc is not None or d.overrides is not None for d in doclets)
