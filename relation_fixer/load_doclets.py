"""Logic for loading and writing doclet dumps."""

import json
from pathlib import Path

import yaml

from relation_fixer.doclet import Doclet
from relation_fixer.iter_doclet_records import iter_doclet_records

YAML_SUFFIXES = {".yml", ".yaml"}


def load_doclets(path: Path) -> list[Doclet]:
    """Load doclets from a JSON (`jsdoc -X`) or YAML dump."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        doc = yaml.safe_load(text)
    else:
        doc = json.loads(text)
    return [Doclet.from_dict(record) for record in iter_doclet_records(doc)]


def write_doclets(path: Path, doclets: list[Doclet]) -> None:
    """Write doclets as a JSON list of JSDoc records."""
    path.parent.mkdir(parents=True, exist_ok=True)
    records = [d.to_dict() for d in doclets]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)
        f.write("\n")
