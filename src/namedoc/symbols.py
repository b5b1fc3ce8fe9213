"""Symbol descriptors supplied by the collaborator that resolved a source symbol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "SUPPORTED_KINDS",
    "MethodKind",
    "ParameterInfo",
    "SymbolDescriptor",
    "SymbolKind",
    "TypeKind",
    "TypeParameterInfo",
]


class SymbolKind(StrEnum):
    """Kind of a documentable (or not) source symbol.

    Only ``TYPE``, ``METHOD``, ``PROPERTY``, ``FIELD`` and ``EVENT`` produce
    documentation; the remaining members let collaborators describe the other
    symbols of an ancestor chain.
    """

    TYPE = "type"
    METHOD = "method"
    PROPERTY = "property"
    FIELD = "field"
    EVENT = "event"
    NAMESPACE = "namespace"
    PARAMETER = "parameter"
    TYPE_PARAMETER = "type_parameter"
    LOCAL = "local"
    UNKNOWN = "unknown"


SUPPORTED_KINDS: frozenset[SymbolKind] = frozenset(
    {SymbolKind.TYPE, SymbolKind.METHOD, SymbolKind.PROPERTY, SymbolKind.FIELD, SymbolKind.EVENT}
)


class TypeKind(StrEnum):
    """Declaration kind of a type symbol."""

    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    OTHER = "other"


class MethodKind(StrEnum):
    """Distinguishes constructors from ordinary methods."""

    ORDINARY = "ordinary"
    CONSTRUCTOR = "constructor"


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """Method parameter as seen by the documentation builder."""

    name: str
    is_boolean: bool = False


@dataclass(frozen=True, slots=True)
class TypeParameterInfo:
    """Generic type parameter of a method."""

    name: str


@dataclass(frozen=True, slots=True)
class SymbolDescriptor:
    """Immutable metadata describing one symbol to document.

    Attributes
    ----------
    kind : SymbolKind
        Symbol kind used for builder dispatch.
    name : str
        Identifier of the symbol; ``None`` is stored as an empty string.
    is_static : bool
        Static member flag (distinguishes static constructors).
    is_boolean : bool
        Boolean-typed property or field.
    parameters : tuple[ParameterInfo, ...]
        Method parameters in declaration order.
    type_parameters : tuple[TypeParameterInfo, ...]
        Method type parameters in declaration order.
    returns_void : bool
        Method returns nothing.
    return_type_name : str
        Simple name of the method's return type.
    returns_boolean : bool
        Method returns a boolean.
    return_is_async_task : bool
        Return type is the asynchronous task marker.
    return_async_result_type_name : str | None
        Result type argument of a generic task marker, if any.
    containing_type_name : str
        Simple name of the containing type.
    type_kind : TypeKind
        Declaration kind for type symbols.
    method_kind : MethodKind
        Constructor or ordinary method.
    has_getter : bool
        Property exposes a getter.
    has_setter : bool
        Property exposes a setter.
    """

    kind: SymbolKind
    name: str = ""
    is_static: bool = False
    is_boolean: bool = False
    parameters: tuple[ParameterInfo, ...] = ()
    type_parameters: tuple[TypeParameterInfo, ...] = ()
    returns_void: bool = True
    return_type_name: str = ""
    returns_boolean: bool = False
    return_is_async_task: bool = False
    return_async_result_type_name: str | None = None
    containing_type_name: str = ""
    type_kind: TypeKind = TypeKind.OTHER
    method_kind: MethodKind = MethodKind.ORDINARY
    has_getter: bool = False
    has_setter: bool = False

    def __post_init__(self) -> None:
        # Collaborators may hand over lists and None names; freeze them here.
        if self.name is None:
            object.__setattr__(self, "name", "")
        if self.return_type_name is None:
            object.__setattr__(self, "return_type_name", "")
        if self.containing_type_name is None:
            object.__setattr__(self, "containing_type_name", "")
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "type_parameters", tuple(self.type_parameters))

    @property
    def is_supported(self) -> bool:
        """Return True when the builder can document this kind of symbol."""
        return self.kind in SUPPORTED_KINDS
