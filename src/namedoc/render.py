"""Render documentation models into ordered entries and doc-comment lines."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from jinja2 import Environment, StrictUndefined

from namedoc.logging import get_logger
from namedoc.schema import DocEntry, DocTag

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jinja2 import Template

    from namedoc.schema import DocumentationModel

__all__ = ["format_xml_doc", "normalize_sentence", "render"]

LOGGER = get_logger(__name__)

# Entry text is already literal markup (cross references), so nothing is escaped.
_TEMPLATE = """{% for entry in entries %}{% if entry.tag == 'summary' %}{{ prefix }}<summary>
{{ prefix }}{{ entry.text }}
{{ prefix }}</summary>
{% else %}{{ prefix }}<{{ entry.tag }}{% for key, value in entry.attributes.items() %} {{ key }}="{{ value }}"{% endfor %}>{{ entry.text }}</{{ entry.tag }}>
{% endif %}{% endfor %}"""


def _build_environment() -> Environment:
    """Build the Jinja2 environment used for doc-comment rendering.

    Returns
    -------
    Environment
        Environment with strict undefined handling and autoescaping disabled.
    """
    return Environment(
        undefined=StrictUndefined,
        trim_blocks=False,
        lstrip_blocks=True,
        autoescape=False,
        keep_trailing_newline=False,
    )


_ENV = _build_environment()
_TEMPLATE_OBJ: Template = _ENV.from_string(_TEMPLATE)


def normalize_sentence(text: str | None) -> str:
    """Return ``text`` as a sentence.

    Surrounding whitespace is stripped, a lowercase first letter is
    uppercased and a trailing period is appended when missing. Blank input
    yields an empty string.

    Examples
    --------
    >>> normalize_sentence("  loads the value")
    'Loads the value.'
    >>> normalize_sentence("Already done.")
    'Already done.'
    """
    if text is None or not text.strip():
        return ""
    text = text.strip()
    if text[0].islower():
        text = text[0].upper() + text[1:]
    if not text.endswith("."):
        text += "."
    return text


def render(model: DocumentationModel) -> list[DocEntry]:
    """Serialize ``model`` into entries in output order.

    Parameters
    ----------
    model : DocumentationModel
        Documentation to render.

    Returns
    -------
    list[DocEntry]
        Summary (when non-blank), one entry per type parameter, one entry per
        parameter, then returns (when non-blank). Every text is normalized.
    """
    entries: list[DocEntry] = []
    if model.summary.strip():
        entries.append(DocEntry(DocTag.SUMMARY, normalize_sentence(model.summary)))
    entries.extend(
        DocEntry(
            DocTag.TYPE_PARAMETER,
            normalize_sentence(type_parameter.description),
            MappingProxyType({"name": type_parameter.name}),
        )
        for type_parameter in model.type_parameters
    )
    entries.extend(
        DocEntry(
            DocTag.PARAMETER,
            normalize_sentence(parameter.description),
            MappingProxyType({"name": parameter.name}),
        )
        for parameter in model.parameters
    )
    if model.returns.strip():
        entries.append(DocEntry(DocTag.RETURNS, normalize_sentence(model.returns)))
    return entries


def format_xml_doc(entries: Iterable[DocEntry], prefix: str = "/// ") -> list[str]:
    """Format rendered entries as XML doc-comment lines without indentation.

    Parameters
    ----------
    entries : Iterable[DocEntry]
        Entries produced by :func:`render`.
    prefix : str, optional
        Comment marker placed before every line. Defaults to ``"/// "``.

    Returns
    -------
    list[str]
        One string per output line.

    Examples
    --------
    >>> format_xml_doc([DocEntry(DocTag.RETURNS, "The result.")])
    ['/// <returns>The result.</returns>']
    """
    materialized = list(entries)
    rendered = _TEMPLATE_OBJ.render(entries=materialized, prefix=prefix)
    lines = rendered.splitlines()
    LOGGER.debug(
        "Formatted %d entries into %d lines",
        len(materialized),
        len(lines),
        extra={"operation": "format_xml_doc"},
    )
    return lines
