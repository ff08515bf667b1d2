"""Fingerprint of the settings that decide which doclets get written."""

import hashlib
import json
from typing import Any

from relation_fixer.load_config import resolve_passes


def compute_config_hash(config: dict[str, Any]) -> str:
    """Hash the resolved passes, entity kinds and output flags.

    Passes are hashed after parsing, so `extends` and `augmentsNested` give the
    same hash. Entity kind order and keys the fixer does not read are ignored.
    """
    settings = {
        "passes": [
            {
                "relation": options.relation.value,
                "filter": options.filter,
                "only_implicitly_inherited": options.only_implicitly_inherited,
            }
            for options in resolve_passes(config)
        ],
        "entity_kinds": sorted(config.get("entity_kinds", [])),
        "drop_ignored": bool(config.get("drop_ignored")),
        "strict": bool(config.get("strict")),
    }
    settings_json = json.dumps(settings, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(settings_json.encode("utf-8")).hexdigest()
