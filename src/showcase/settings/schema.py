"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_API_BASE_URL, PLACEHOLDER_THUMBNAIL, WINDOW_DEFAULT_SIZE

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "showcase/settings.schema.json",
    "type": "object",
    "required": ["schema", "api_base_url", "placeholder_thumbnail", "ui"],
    "properties": {
        "schema": {"const": "showcase/settings@1"},
        "api_base_url": {"type": "string", "pattern": "^https?://"},
        "image_base_url": {"type": ["string", "null"]},
        "placeholder_thumbnail": {"type": "string", "minLength": 1},
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR"],
        },
        "ui": {
            "type": "object",
            "properties": {
                "last_catalog": {"type": ["string", "null"]},
                "window_width": {"type": "number", "minimum": 320},
                "window_height": {"type": "number", "minimum": 240},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "showcase/settings@1",
    "api_base_url": DEFAULT_API_BASE_URL,
    "image_base_url": None,
    "placeholder_thumbnail": PLACEHOLDER_THUMBNAIL,
    "log_level": "WARNING",
    "ui": {
        "last_catalog": None,
        "window_width": WINDOW_DEFAULT_SIZE[0],
        "window_height": WINDOW_DEFAULT_SIZE[1],
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "ui" and isinstance(value, dict):
                target = merged.setdefault("ui", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key == "image_base_url" and value == "":
                merged[key] = None
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
