"""Report of the doclets added and ignored during relation fixing."""

import json
import time
from dataclasses import dataclass, field
from typing import Any

from relation_fixer.missing_doclets_data import MissingDocletsData
from relation_fixer.relation_kind import RelationKind


@dataclass
class FixEntry:
    """Outcome of one resolver pass over one entity."""

    entity: str
    relation: str
    added: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)


class FixReport:
    """Collects resolver outcomes and writes them as JSON."""

    def __init__(self, config_hash: str) -> None:
        """Initialize an empty report stamped with the configuration hash."""
        self.config_hash = config_hash
        self.entries: list[FixEntry] = []
        self.start_time = time.time()

    def add_result(
        self, entity: str, relation: RelationKind, result: MissingDocletsData
    ) -> None:
        """Record a pass; passes that changed nothing are not kept."""
        if not result.new_doclets and not result.ignored_doclets:
            return
        self.entries.append(
            FixEntry(
                entity=entity,
                relation=relation.value,
                added=[d.longname for d in result.new_doclets],
                ignored=[d.longname for d in result.ignored_doclets],
            )
        )

    def generate_report(self, path: str) -> None:
        """Write the report to `path`."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_entities": len({e.entity for e in self.entries}),
            },
            "results": [
                {
                    "entity": e.entity,
                    "relation": e.relation,
                    "added": e.added,
                    "ignored": e.ignored,
                }
                for e in self.entries
            ],
            "stats": self._compute_stats(),
        }

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

    def _compute_stats(self) -> dict[str, Any]:
        added: dict[str, int] = {}
        ignored: dict[str, int] = {}
        for e in self.entries:
            added[e.relation] = added.get(e.relation, 0) + len(e.added)
            ignored[e.relation] = ignored.get(e.relation, 0) + len(e.ignored)
        return {"added_by_relation": added, "ignored_by_relation": ignored}
