"""Data structures describing generated documentation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ParameterDoc:
    """Description of a single method parameter."""

    name: str
    description: str


@dataclass(frozen=True, slots=True)
class TypeParameterDoc:
    """Description of a single generic type parameter."""

    name: str
    description: str


@dataclass(frozen=True, slots=True)
class DocumentationModel:
    """Structured documentation assembled for one symbol before rendering."""

    summary: str = ""
    returns: str = ""
    parameters: tuple[ParameterDoc, ...] = ()
    type_parameters: tuple[TypeParameterDoc, ...] = ()

    @property
    def has_content(self) -> bool:
        """Return True when any section would produce output."""
        return bool(
            self.summary.strip()
            or self.returns.strip()
            or self.parameters
            or self.type_parameters
        )


class DocTag(StrEnum):
    """Tag of a rendered documentation entry."""

    SUMMARY = "summary"
    TYPE_PARAMETER = "typeparam"
    PARAMETER = "param"
    RETURNS = "returns"


@dataclass(frozen=True, slots=True)
class DocEntry:
    """One rendered documentation entry, in output order."""

    tag: DocTag
    text: str
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @property
    def name(self) -> str | None:
        """Return the ``name`` attribute of parameter entries."""
        return self.attributes.get("name")


__all__ = [
    "DocEntry",
    "DocTag",
    "DocumentationModel",
    "ParameterDoc",
    "TypeParameterDoc",
]
