"""Sample request bodies and the Postman documents shipped with the generated project."""
import json
import uuid
from typing import Any, Dict, Iterable

from umlgen.generators.spring_gen.naming import pluralize, resource_path
from umlgen.generators.spring_gen.types import CanonicalType, GeneratorOptions, PlannedClass

POSTMAN_SCHEMA = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"

_SAMPLE_VALUES = {
    CanonicalType.INTEGER: 1,
    CanonicalType.LONG: 1,
    CanonicalType.DOUBLE: 1.0,
    CanonicalType.FLOAT: 1.0,
    CanonicalType.DECIMAL: 1.0,
    CanonicalType.BOOLEAN: True,
    CanonicalType.DATE: "2024-01-01",
    CanonicalType.DATE_TIME: "2024-01-01T00:00:00",
    CanonicalType.UUID: "00000000-0000-0000-0000-000000000000",
}


def build_sample_body(planned: PlannedClass) -> Dict[str, Any]:
    """
    Build a sample POST body from the class's scalar fields.

    Args:
        planned: Planned class whose scalar fields drive the payload

    Returns:
        Dictionary of field name to sample value; text fields get "sample_<field>"
    """
    payload = {}
    for f in planned.scalar_fields:
        payload[f.name] = _SAMPLE_VALUES.get(f.type, f"sample_{f.name}")
    return payload


def _url(endpoint: str) -> Dict[str, Any]:
    return {
        "raw": f"{{{{base_url}}}}/api/{endpoint}",
        "host": ["{{base_url}}"],
        "path": ["api", endpoint],
    }


def build_postman_collection(planned_classes: Iterable[PlannedClass], options: GeneratorOptions) -> Dict[str, Any]:
    """One request group per class with list + create requests."""
    groups = []
    for planned in planned_classes:
        class_name = planned.name
        endpoint = resource_path(class_name)
        groups.append({
            "name": f"{class_name} CRUD",
            "item": [
                {
                    "name": f"Get All {pluralize(class_name)}",
                    "request": {
                        "method": "GET",
                        "header": [{"key": "Accept", "value": "application/json"}],
                        "url": _url(endpoint),
                    },
                },
                {
                    "name": f"Create {class_name}",
                    "request": {
                        "method": "POST",
                        "header": [
                            {"key": "Content-Type", "value": "application/json"},
                            {"key": "Accept", "value": "application/json"},
                        ],
                        "body": {
                            "mode": "raw",
                            "raw": json.dumps(build_sample_body(planned), indent=2),
                        },
                        "url": _url(endpoint),
                    },
                },
            ],
        })

    return {
        "info": {
            "name": f"{options.project_name} API",
            "description": "Generated from the class diagram",
            "schema": POSTMAN_SCHEMA,
        },
        "item": groups,
        "variable": [
            {"key": "base_url", "value": options.base_url, "type": "string"},
        ],
    }


def build_postman_environment(options: GeneratorOptions) -> Dict[str, Any]:
    # name-based id keeps the output reproducible
    env_id = uuid.uuid5(uuid.NAMESPACE_URL, f"{options.project_name}/environment")
    return {
        "id": str(env_id),
        "name": f"{options.project_name} Environment",
        "values": [
            {"key": "base_url", "value": options.base_url, "enabled": True, "type": "default"},
        ],
        "_postman_variable_scope": "environment",
    }


def render_postman_collection(planned_classes: Iterable[PlannedClass], options: GeneratorOptions) -> str:
    return json.dumps(build_postman_collection(planned_classes, options), indent=2)


def render_postman_environment(options: GeneratorOptions) -> str:
    return json.dumps(build_postman_environment(options), indent=2)
