"""Data model for the outcome of resolving one entity."""

from dataclasses import dataclass, field

from relation_fixer.doclet import Doclet


@dataclass
class MissingDocletsData:
    """Doclets to insert and existing doclets to mark ignored."""

    new_doclets: list[Doclet] = field(default_factory=list)
    ignored_doclets: list[Doclet] = field(default_factory=list)
