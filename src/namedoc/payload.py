"""Convert JSON-compatible payloads into symbol descriptors.

Collaborators that resolve symbols out of process (for example an editor
extension) hand descriptors over as JSON objects. Payloads are validated
against :data:`DESCRIPTOR_SCHEMA` before any descriptor is constructed.

Examples
--------
>>> descriptor = descriptor_from_mapping({"kind": "field", "name": "maxCount"})
>>> descriptor.kind
<SymbolKind.FIELD: 'field'>
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from namedoc.errors import SchemaValidationError
from namedoc.logging import get_logger
from namedoc.symbols import (
    MethodKind,
    ParameterInfo,
    SymbolDescriptor,
    SymbolKind,
    TypeKind,
    TypeParameterInfo,
)

__all__ = ["DESCRIPTOR_SCHEMA", "descriptor_from_mapping", "descriptor_to_mapping"]

LOGGER = get_logger(__name__)

_SCHEMA_ERROR_LIMIT: Final = 5

_NULLABLE_STRING: Final = {"type": ["string", "null"]}

DESCRIPTOR_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://namedoc.dev/schema/symbol-descriptor.v1.json",
    "title": "SymbolDescriptor",
    "type": "object",
    "required": ["kind"],
    "additionalProperties": False,
    "properties": {
        "kind": {"type": "string", "minLength": 1},
        "name": _NULLABLE_STRING,
        "is_static": {"type": "boolean"},
        "is_boolean": {"type": "boolean"},
        "parameters": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string"},
                    "is_boolean": {"type": "boolean"},
                },
            },
        },
        "type_parameters": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {"name": {"type": "string"}},
            },
        },
        "returns_void": {"type": "boolean"},
        "return_type_name": _NULLABLE_STRING,
        "returns_boolean": {"type": "boolean"},
        "return_is_async_task": {"type": "boolean"},
        "return_async_result_type_name": _NULLABLE_STRING,
        "containing_type_name": _NULLABLE_STRING,
        "type_kind": {"enum": [kind.value for kind in TypeKind]},
        "method_kind": {"enum": [kind.value for kind in MethodKind]},
        "has_getter": {"type": "boolean"},
        "has_setter": {"type": "boolean"},
    },
}

_VALIDATOR = Draft202012Validator(DESCRIPTOR_SCHEMA)


def _error_sort_key(error: ValidationError) -> tuple[str, ...]:
    return tuple(str(part) for part in error.absolute_path)


def _validate(payload: object) -> None:
    errors = sorted(_VALIDATOR.iter_errors(payload), key=_error_sort_key)
    if not errors:
        return
    messages: list[str] = []
    for error in errors[:_SCHEMA_ERROR_LIMIT]:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        messages.append(f"{location}: {error.message}")
    if len(errors) > _SCHEMA_ERROR_LIMIT:
        remaining = len(errors) - _SCHEMA_ERROR_LIMIT
        messages.append(f"... {remaining} additional validation errors")
    LOGGER.debug(
        "Descriptor payload rejected",
        extra={"operation": "descriptor_from_mapping", "status": "error", "errors": messages},
    )
    raise SchemaValidationError(messages[0], errors=messages)


def _symbol_kind(raw: str) -> SymbolKind:
    try:
        return SymbolKind(raw.lower())
    except ValueError:
        return SymbolKind.UNKNOWN


def descriptor_from_mapping(payload: Mapping[str, object]) -> SymbolDescriptor:
    """Validate ``payload`` and build the corresponding descriptor.

    Parameters
    ----------
    payload : Mapping[str, object]
        JSON-compatible object following :data:`DESCRIPTOR_SCHEMA`.

    Returns
    -------
    SymbolDescriptor
        Descriptor built from the payload. Unrecognised ``kind`` strings map to
        :attr:`SymbolKind.UNKNOWN`, which the builder declines to document.

    Raises
    ------
    SchemaValidationError
        If the payload does not satisfy the schema. ``errors`` lists each
        violation prefixed with its JSON path.
    """
    _validate(payload)
    data = cast("Mapping[str, Any]", payload)
    return SymbolDescriptor(
        kind=_symbol_kind(data["kind"]),
        name=data.get("name") or "",
        is_static=data.get("is_static", False),
        is_boolean=data.get("is_boolean", False),
        parameters=tuple(
            ParameterInfo(item["name"], item.get("is_boolean", False))
            for item in data.get("parameters", ())
        ),
        type_parameters=tuple(
            TypeParameterInfo(item["name"]) for item in data.get("type_parameters", ())
        ),
        returns_void=data.get("returns_void", True),
        return_type_name=data.get("return_type_name") or "",
        returns_boolean=data.get("returns_boolean", False),
        return_is_async_task=data.get("return_is_async_task", False),
        return_async_result_type_name=data.get("return_async_result_type_name"),
        containing_type_name=data.get("containing_type_name") or "",
        type_kind=TypeKind(data.get("type_kind", TypeKind.OTHER)),
        method_kind=MethodKind(data.get("method_kind", MethodKind.ORDINARY)),
        has_getter=data.get("has_getter", False),
        has_setter=data.get("has_setter", False),
    )


def descriptor_to_mapping(descriptor: SymbolDescriptor) -> dict[str, object]:
    """Return the JSON-compatible payload for ``descriptor``."""
    return {
        "kind": descriptor.kind.value,
        "name": descriptor.name,
        "is_static": descriptor.is_static,
        "is_boolean": descriptor.is_boolean,
        "parameters": [
            {"name": parameter.name, "is_boolean": parameter.is_boolean}
            for parameter in descriptor.parameters
        ],
        "type_parameters": [{"name": item.name} for item in descriptor.type_parameters],
        "returns_void": descriptor.returns_void,
        "return_type_name": descriptor.return_type_name,
        "returns_boolean": descriptor.returns_boolean,
        "return_is_async_task": descriptor.return_is_async_task,
        "return_async_result_type_name": descriptor.return_async_result_type_name,
        "containing_type_name": descriptor.containing_type_name,
        "type_kind": descriptor.type_kind.value,
        "method_kind": descriptor.method_kind.value,
        "has_getter": descriptor.has_getter,
        "has_setter": descriptor.has_setter,
    }
