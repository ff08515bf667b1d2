"""Utility for iterating over doclet records in a parsed dump."""

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)


def iter_doclet_records(doc: object) -> Iterable[dict[str, Any]]:
    """Iterate over the records of a `jsdoc -X` dump that carry a longname.

    The dump is either a list of records or a mapping with a `doclets` list.
    """
    records = doc.get("doclets") if isinstance(doc, dict) else doc
    for record in records or []:
        if isinstance(record, dict) and record.get("longname"):
            yield record
        else:
            logger.warning("Skipping doclet record without longname: %r", record)
