from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, cast

import jsonschema  # type: ignore[import-untyped]

SCHEMA_DIR = Path(__file__).parent / "schemas"
SIGNED_OBJECT_SCHEMA_PATH = SCHEMA_DIR / "signed_object.schema.json"


def load_schema(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    return cast(Dict[str, Any], json.loads(p.read_text(encoding="utf-8")))


def validate(instance: Dict[str, Any], schema: Dict[str, Any]) -> None:
    jsonschema.validate(instance=instance, schema=schema)


def validate_signed_object(payload: Dict[str, Any]) -> None:
    """Validate a ``SignedObject.to_dict()`` payload.

    Raises:
        jsonschema.ValidationError: If the payload does not match.
    """
    validate(payload, load_schema(SIGNED_OBJECT_SCHEMA_PATH))
