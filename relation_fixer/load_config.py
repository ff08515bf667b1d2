"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from relation_fixer.deep_merge import deep_merge
from relation_fixer.resolve_options import ResolveOptions

DEFAULT_CONFIG: dict[str, Any] = {
    "passes": [
        # Statics are not inherited by JSDoc itself.
        {"relation": "augmentsNested", "filter": {"scope": "static"}},
        {"relation": "mixesNested", "only_implicitly_inherited": True},
        {"relation": "implementsNested"},
    ],
    "entity_kinds": ["class", "interface", "mixin"],
    "drop_ignored": False,
    "strict": False,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config


def resolve_passes(config: dict[str, Any]) -> list[ResolveOptions]:
    """Turn the configured `passes` into resolver options, in order."""
    return [ResolveOptions.from_config(entry) for entry in config.get("passes", [])]
