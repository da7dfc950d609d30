from __future__ import annotations

from typing import Any

import yaml

from ..errors import SchemaValidationError


def parse_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaValidationError(f"{source}: invalid YAML: {exc}") from exc
