from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Iterable

import jsonschema
from referencing import Registry, Resource

from ..errors import SchemaValidationError
from .yaml_utils import parse_yaml


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    path = resources.files("catppuccin_portlist") / "schemas" / schema_name
    return json.loads(path.read_text(encoding="utf-8"))


def _registry(extra_schemas: Iterable[str]) -> Registry:
    registry: Registry = Registry()
    for name in extra_schemas:
        schema = load_schema(name)
        registry = registry.with_resource(schema.get("$id", name), Resource.from_contents(schema))
    return registry


def validate_payload(payload: Any, schema_name: str, source: str, extra_schemas: Iterable[str] = ()) -> None:
    schema = load_schema(schema_name)
    try:
        jsonschema.validate(payload, schema, registry=_registry(extra_schemas))
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise SchemaValidationError(f"schema validation failed for {source} at {loc}: {exc.message}") from exc


def validate_yaml(text: str, schema_name: str, source: str, extra_schemas: Iterable[str] = ()) -> Any:
    payload = parse_yaml(text, source)
    validate_payload(payload, schema_name, source, extra_schemas)
    return payload
