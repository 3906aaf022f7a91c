"""
Canonical JSON for transaction hand-off to the signing primitive.

The signing collaborator takes a JSON string, not a dict, so the caller's
field bag crosses the boundary as an immutable snapshot. Sorted keys and
compact separators make the string deterministic for a given mapping,
which also lets strict combine mode compare decoded transactions.
"""

import json
from typing import Any


def canonical_json(obj: Any) -> str:
    """
    Serialize a transaction (or any JSON value) to canonical JSON.

    Rules:
    - Keys sorted alphabetically (recursive)
    - No whitespace
    - Non-ASCII kept as-is (no escapes)
    - NaN / Infinity rejected
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
