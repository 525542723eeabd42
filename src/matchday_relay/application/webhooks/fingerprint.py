"""Application webhooks – stable fingerprint of a payload's business content."""
from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping

__all__ = ["VOLATILE_FIELDS", "canonical_json", "fingerprint_digest"]

# Fields that change between two sends of the same business event.
VOLATILE_FIELDS: frozenset[str] = frozenset(
    {
        "timestamp",
        "system",
        "webhook",
        "club",
        "anonymise_faces",
        "use_initials_only",
        "idempotency_key",
    }
)


def canonical_json(payload: Mapping[str, Any]) -> bytes:
    """Sorted-key JSON of *payload* without volatile fields.

    Raises ``TypeError``/``ValueError`` for content that is not JSON-serialisable.
    """
    business = {k: v for k, v in payload.items() if k not in VOLATILE_FIELDS}
    return json.dumps(business, sort_keys=True, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def fingerprint_digest(payload: Mapping[str, Any]) -> str:
    return hashlib.sha256(canonical_json(payload)).hexdigest()
