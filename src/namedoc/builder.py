"""Assemble documentation models from symbol descriptors.

Each supported symbol kind has a pure builder function; :func:`build_documentation`
dispatches on the descriptor kind and returns ``None`` for kinds it cannot
document. :func:`document_symbol` walks a caller-supplied ancestor chain until
one of the symbols can be documented.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, assert_never

from namedoc.config import DEFAULT_CONFIG, BuilderConfig
from namedoc.logging import get_logger
from namedoc.phrases import (
    bool_core_phrase,
    bool_method_summary,
    lifecycle_summary,
    method_summary,
    noun_phrase,
    type_noun_phrase,
    type_reference,
)
from namedoc.render import render
from namedoc.schema import DocEntry, DocumentationModel, ParameterDoc, TypeParameterDoc
from namedoc.symbols import (
    MethodKind,
    ParameterInfo,
    SymbolDescriptor,
    SymbolKind,
    TypeKind,
    TypeParameterInfo,
)

__all__ = [
    "DocumentationResult",
    "build_documentation",
    "document_symbol",
]

LOGGER = get_logger(__name__)

ASYNC_RETURN_SENTENCE: Final = "A task that represents the asynchronous operation."
BOOL_RETURN_SENTENCE: Final = "True if the operation succeeds; otherwise, false."


@dataclass(frozen=True, slots=True)
class DocumentationResult:
    """Outcome of documenting the first supported symbol of an ancestor chain.

    Attributes
    ----------
    descriptor : SymbolDescriptor
        The symbol that was documented.
    model : DocumentationModel
        Documentation assembled for ``descriptor``.
    entries : tuple[DocEntry, ...]
        Rendered entries in output order.
    """

    descriptor: SymbolDescriptor
    model: DocumentationModel
    entries: tuple[DocEntry, ...]


def _type_summary(descriptor: SymbolDescriptor, config: BuilderConfig) -> str:
    reference = type_reference(descriptor.name, config.cross_reference_format)
    match descriptor.type_kind:
        case TypeKind.CLASS:
            return f"Represents the {reference} class."
        case TypeKind.STRUCT:
            return f"Represents the {reference} struct."
        case TypeKind.INTERFACE:
            return f"Defines the {reference} interface."
        case TypeKind.ENUM:
            noun = type_noun_phrase(descriptor.name, lexicon=config.lexicon)
            return f"Specifies values that represent {noun}."
        case TypeKind.OTHER:
            noun = type_noun_phrase(descriptor.name, lexicon=config.lexicon)
            return f"Represents the {noun}."
        case _:
            assert_never(descriptor.type_kind)


def _build_type(descriptor: SymbolDescriptor, config: BuilderConfig) -> DocumentationModel:
    return DocumentationModel(summary=_type_summary(descriptor, config))


def _method_summary(descriptor: SymbolDescriptor, config: BuilderConfig) -> str:
    if descriptor.method_kind is MethodKind.CONSTRUCTOR:
        reference = type_reference(descriptor.containing_type_name, config.cross_reference_format)
        if descriptor.is_static:
            return f"Initializes static members of the {reference} class."
        return f"Initializes a new instance of the {reference} class."

    if config.lifecycle_method_summaries:
        summary = lifecycle_summary(
            descriptor.name,
            descriptor.containing_type_name,
            len(descriptor.parameters),
            cross_reference_format=config.cross_reference_format,
        )
        if summary:
            return summary

    if config.bool_method_summaries and descriptor.returns_boolean and not descriptor.returns_void:
        summary = bool_method_summary(descriptor.name, lexicon=config.lexicon)
    else:
        summary = method_summary(descriptor.name, lexicon=config.lexicon)
    if summary:
        return summary
    noun = noun_phrase(descriptor.name, lexicon=config.lexicon)
    return f"Performs the {noun} operation." if noun else "Performs the operation."


def _parameter_doc(parameter: ParameterInfo, config: BuilderConfig) -> ParameterDoc:
    if parameter.is_boolean:
        phrase = bool_core_phrase(parameter.name, lexicon=config.lexicon)
        return ParameterDoc(parameter.name, f"A value indicating whether {phrase}.")
    noun = noun_phrase(parameter.name, lexicon=config.lexicon)
    return ParameterDoc(parameter.name, f"The {noun}.")


def _type_parameter_doc(type_parameter: TypeParameterInfo) -> TypeParameterDoc:
    description = f"The {type_parameter.name.lower()} type parameter."
    return TypeParameterDoc(type_parameter.name, description)


def _return_description(descriptor: SymbolDescriptor, config: BuilderConfig) -> str:
    if descriptor.returns_void:
        return ""
    if descriptor.return_is_async_task:
        result_type = descriptor.return_async_result_type_name
        if result_type:
            return (
                f"{ASYNC_RETURN_SENTENCE} The task result contains the {result_type.lower()}."
            )
        return ASYNC_RETURN_SENTENCE
    if descriptor.returns_boolean:
        return BOOL_RETURN_SENTENCE
    noun = type_noun_phrase(descriptor.return_type_name, lexicon=config.lexicon)
    if not noun:
        return "The result."
    return f"The {noun.lower()} result."


def _build_method(descriptor: SymbolDescriptor, config: BuilderConfig) -> DocumentationModel:
    return DocumentationModel(
        summary=_method_summary(descriptor, config),
        returns=_return_description(descriptor, config),
        parameters=tuple(_parameter_doc(parameter, config) for parameter in descriptor.parameters),
        type_parameters=tuple(
            _type_parameter_doc(type_parameter) for type_parameter in descriptor.type_parameters
        ),
    )


def _build_property(descriptor: SymbolDescriptor, config: BuilderConfig) -> DocumentationModel:
    getter, setter = descriptor.has_getter, descriptor.has_setter
    # A boolean property without accessors falls through to the noun sentences.
    if descriptor.is_boolean and (getter or setter):
        phrase = bool_core_phrase(descriptor.name, lexicon=config.lexicon)
        if getter and setter:
            summary = f"Gets or sets a value indicating whether {phrase}."
        elif getter:
            summary = f"Gets a value indicating whether {phrase}."
        else:
            summary = f"Sets a value indicating whether {phrase}."
        return DocumentationModel(summary=summary)

    noun = noun_phrase(descriptor.name, lexicon=config.lexicon)
    if getter and setter:
        summary = f"Gets or sets the {noun}."
    elif getter:
        summary = f"Gets the {noun}."
    elif setter:
        summary = f"Sets the {noun}."
    else:
        summary = f"Represents the {noun}."
    return DocumentationModel(summary=summary)


def _build_field(descriptor: SymbolDescriptor, config: BuilderConfig) -> DocumentationModel:
    if descriptor.is_boolean:
        phrase = bool_core_phrase(descriptor.name, lexicon=config.lexicon)
        return DocumentationModel(summary=f"A value indicating whether {phrase}.")
    noun = noun_phrase(descriptor.name, lexicon=config.lexicon)
    return DocumentationModel(summary=f"The {noun}.")


def _build_event(descriptor: SymbolDescriptor, config: BuilderConfig) -> DocumentationModel:
    noun = noun_phrase(descriptor.name, lexicon=config.lexicon)
    return DocumentationModel(summary=f"Occurs when the {noun}.")


def build_documentation(
    descriptor: SymbolDescriptor, config: BuilderConfig | None = None
) -> DocumentationModel | None:
    """Build the documentation model for ``descriptor``.

    Parameters
    ----------
    descriptor : SymbolDescriptor
        Symbol to document.
    config : BuilderConfig | None, optional
        Builder configuration. Defaults to ``DEFAULT_CONFIG``.

    Returns
    -------
    DocumentationModel | None
        The assembled model, or ``None`` when the symbol kind cannot be
        documented. No partial model is ever returned.

    Examples
    --------
    >>> from namedoc.symbols import SymbolDescriptor, SymbolKind
    >>> model = build_documentation(
    ...     SymbolDescriptor(SymbolKind.PROPERTY, "IsVisible", is_boolean=True,
    ...                      has_getter=True, has_setter=True)
    ... )
    >>> model.summary
    'Gets or sets a value indicating whether the value is visible.'
    """
    config = config or DEFAULT_CONFIG
    log_fields = {
        "operation": "build_documentation",
        "symbol_kind": str(descriptor.kind),
        "symbol_name": descriptor.name,
    }
    match descriptor.kind:
        case SymbolKind.TYPE:
            model = _build_type(descriptor, config)
        case SymbolKind.METHOD:
            model = _build_method(descriptor, config)
        case SymbolKind.PROPERTY:
            model = _build_property(descriptor, config)
        case SymbolKind.FIELD:
            model = _build_field(descriptor, config)
        case SymbolKind.EVENT:
            model = _build_event(descriptor, config)
        case (
            SymbolKind.NAMESPACE
            | SymbolKind.PARAMETER
            | SymbolKind.TYPE_PARAMETER
            | SymbolKind.LOCAL
            | SymbolKind.UNKNOWN
        ):
            LOGGER.debug(
                "Unsupported symbol kind %s",
                descriptor.kind,
                extra={**log_fields, "status": "unsupported"},
            )
            return None
        case _:
            assert_never(descriptor.kind)
    LOGGER.debug("Built documentation model", extra={**log_fields, "status": "success"})
    return model


def document_symbol(
    chain: Iterable[SymbolDescriptor], config: BuilderConfig | None = None
) -> DocumentationResult | None:
    """Document the first supported symbol of ``chain``.

    Parameters
    ----------
    chain : Iterable[SymbolDescriptor]
        The symbol followed by its containing symbols, innermost first.
    config : BuilderConfig | None, optional
        Builder configuration. Defaults to ``DEFAULT_CONFIG``.

    Returns
    -------
    DocumentationResult | None
        The documented symbol with its model and rendered entries, or ``None``
        when no symbol in the chain can be documented.
    """
    tried: list[SymbolDescriptor] = []
    for descriptor in chain:
        model = build_documentation(descriptor, config)
        if model is not None:
            return DocumentationResult(descriptor, model, tuple(render(model)))
        tried.append(descriptor)
    LOGGER.debug(
        "No documentable symbol in chain of %d",
        len(tried),
        extra={
            "operation": "document_symbol",
            "status": "unsupported",
            "symbol_kind": _kinds(tried),
        },
    )
    return None


def _kinds(descriptors: Sequence[SymbolDescriptor]) -> str:
    return ",".join(str(descriptor.kind) for descriptor in descriptors)
