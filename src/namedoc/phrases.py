"""Synthesize English phrases and sentences from identifier tokens.

Method summaries follow naming conventions in strict priority order: ``Try``,
``To``, ``As``, ``From``, ``On...Changed``, bool prefixes, a leading known verb,
then a generic fallback. A trailing ``Async`` is stripped before the rules run
and reflected as "asynchronously" at the end of the sentence.

Examples
--------
>>> method_summary("TryGetValue")
'Tries to get the value.'
>>> method_summary("LoadAsync")
'Loads the value asynchronously.'
>>> bool_core_phrase("IsEnabled")
'the value is enabled'
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from namedoc.lexicon import DEFAULT_LEXICON, Lexicon, has_bool_prefix
from namedoc.tokenizer import tokenize

__all__ = [
    "ASYNC_SUFFIX",
    "DEFAULT_CROSS_REFERENCE_FORMAT",
    "bare_noun_phrase",
    "bool_core_phrase",
    "bool_method_summary",
    "lifecycle_summary",
    "method_summary",
    "noun_phrase",
    "type_noun_phrase",
    "type_reference",
    "words_phrase",
]

ASYNC_SUFFIX: Final = "Async"
DEFAULT_CROSS_REFERENCE_FORMAT: Final = '<see cref="{name}"/>'

_THE: Final = "the "
_DEFAULT_OBJECT: Final = "the value"

_CHANGE_SUFFIXES: Final[dict[str, str]] = {
    "changed": " changes.",
    "modified": " is modified.",
    "changing": " is changing.",
}

_BOOL_CORE_PREFIXES: Final = frozenset({"is", "has", "can", "should", "must"})

TokenInput = str | Sequence[str] | None


def _as_tokens(value: TokenInput) -> Sequence[str]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tokenize(value)
    return value


def _strip_async(name: str) -> tuple[str, bool]:
    if len(name) > len(ASYNC_SUFFIX) and name.lower().endswith(ASYNC_SUFFIX.lower()):
        return name[: -len(ASYNC_SUFFIX)], True
    return name, False


def _asynchronously(sentence: str) -> str:
    return sentence.removesuffix(".") + " asynchronously."


def words_phrase(tokens: TokenInput, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Join tokens with spaces, lowercasing everything except known acronyms.

    Parameters
    ----------
    tokens : str | Sequence[str] | None
        Tokens, or an identifier to tokenize first.
    lexicon : Lexicon, optional
        Tables used to recognise acronyms. Defaults to ``DEFAULT_LEXICON``.

    Returns
    -------
    str
        Space separated words; empty for empty input.
    """
    words = [
        token if lexicon.is_known_acronym(token) else token.lower()
        for token in _as_tokens(tokens)
    ]
    return " ".join(words)


def noun_phrase(tokens: TokenInput, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return ``"the <words>"`` or an empty string when there are no words."""
    words = words_phrase(tokens, lexicon=lexicon)
    return _THE + words if words else ""


def bare_noun_phrase(tokens: TokenInput, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return the words of ``tokens`` without a leading article."""
    return words_phrase(tokens, lexicon=lexicon)


def type_noun_phrase(type_name: str | None, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return the noun phrase for a type name, dropping an interface ``I`` prefix.

    Examples
    --------
    >>> type_noun_phrase("IRepository")
    'the repository'
    >>> type_noun_phrase("IO")
    'the IO'
    """
    if not type_name:
        return ""
    if len(type_name) > 2 and type_name[0] == "I" and type_name[1].isupper():
        type_name = type_name[1:]
    return noun_phrase(type_name, lexicon=lexicon)


def type_reference(type_name: str, cross_reference_format: str = DEFAULT_CROSS_REFERENCE_FORMAT) -> str:
    """Return the cross-reference placeholder carrying ``type_name`` verbatim."""
    return cross_reference_format.format(name=type_name)


def _try_summary(tokens: Sequence[str], lexicon: Lexicon) -> str:
    target = noun_phrase(tokens[2:], lexicon=lexicon) or _DEFAULT_OBJECT
    return f"Tries to {tokens[1].lower()} {target}."


def _bool_prefix_summary(tokens: Sequence[str], lexicon: Lexicon) -> str:
    prefix = tokens[0].lower()
    return f"Determines whether the value {prefix} {words_phrase(tokens[1:], lexicon=lexicon)}."


def _change_summary(tokens: Sequence[str], lexicon: Lexicon) -> str | None:
    suffix = _CHANGE_SUFFIXES.get(tokens[-1].lower())
    if suffix is None:
        return None
    return f"Occurs when {noun_phrase(tokens[1:-1], lexicon=lexicon)}{suffix}"


def _core_method_summary(tokens: Sequence[str], lexicon: Lexicon) -> str:  # noqa: PLR0911
    first = tokens[0].lower()
    count = len(tokens)

    if count >= 2 and first == "try":
        return _try_summary(tokens, lexicon)
    if count >= 2 and first == "to":
        return f"Converts to {noun_phrase(tokens[1:], lexicon=lexicon)}."
    if count >= 2 and first == "as":
        return f"Treats the value as {bare_noun_phrase(tokens[1:], lexicon=lexicon)}."
    if count >= 2 and first == "from":
        return f"Creates an instance from {noun_phrase(tokens[1:], lexicon=lexicon)}."
    if count >= 3 and first == "on":
        changed = _change_summary(tokens, lexicon)
        if changed is not None:
            return changed
    if has_bool_prefix(tokens):
        return _bool_prefix_summary(tokens, lexicon)
    if lexicon.is_known_verb(tokens[0]):
        target = noun_phrase(tokens[1:], lexicon=lexicon) or _DEFAULT_OBJECT
        return f"{lexicon.third_person_singular(tokens[0])} {target}."
    return f"Performs the {words_phrase(tokens, lexicon=lexicon)} operation."


def method_summary(name: str | None, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return the summary sentence for a method named ``name``.

    Parameters
    ----------
    name : str | None
        Method identifier, optionally ending in ``Async``.
    lexicon : Lexicon, optional
        Tables used for verbs, acronyms and conjugation.

    Returns
    -------
    str
        Summary sentence ending with a period, or an empty string when the
        name has no tokens (callers supply their own fallback).
    """
    if not name:
        return ""
    stripped, is_async = _strip_async(name)
    tokens = tokenize(stripped)
    if not tokens:
        return ""
    summary = _core_method_summary(tokens, lexicon)
    return _asynchronously(summary) if is_async else summary


def bool_method_summary(name: str | None, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return a "Determines whether" summary for a method returning a boolean.

    ``Try`` names keep their canonical "Tries to" sentence and bool prefixes
    use the same sentence as :func:`method_summary`; any other name is phrased
    as a condition.

    Examples
    --------
    >>> bool_method_summary("ContainsKey")
    'Determines whether contains key.'
    """
    if not name:
        return ""
    stripped, is_async = _strip_async(name)
    tokens = tokenize(stripped)
    if not tokens:
        return ""
    if len(tokens) >= 2 and tokens[0].lower() == "try":
        summary = _try_summary(tokens, lexicon)
    elif has_bool_prefix(tokens):
        summary = _bool_prefix_summary(tokens, lexicon)
    else:
        summary = f"Determines whether {words_phrase(tokens, lexicon=lexicon)}."
    return _asynchronously(summary) if is_async else summary


def lifecycle_summary(
    name: str | None,
    containing_type_name: str | None,
    parameter_count: int,
    *,
    cross_reference_format: str = DEFAULT_CROSS_REFERENCE_FORMAT,
) -> str:
    """Return the summary of a parameterless ``Initialize``/``Terminate`` method.

    Returns an empty string for any other method or when the containing type
    is unknown.
    """
    if parameter_count != 0 or not containing_type_name:
        return ""
    reference = type_reference(containing_type_name, cross_reference_format)
    if name == "Initialize":
        return f"Initializes a new instance of the {reference} class."
    if name == "Terminate":
        return f"Terminates an instance of the {reference} class."
    return ""


def bool_core_phrase(name: str | None, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return the clause used in "A value indicating whether {phrase}." sentences.

    Parameters
    ----------
    name : str | None
        Property, field or parameter identifier.
    lexicon : Lexicon, optional
        Tables used to recognise acronyms.

    Returns
    -------
    str
        ``"the value <prefix> <words>"`` for ``Is``/``Has``/``Can``/``Should``/
        ``Must`` names, ``"the <words> is used"`` for ``Use`` names and
        ``"the <words> is set"`` otherwise.
    """
    tokens = tokenize(name)
    if not tokens:
        return "the value is set"
    prefix = tokens[0].lower()
    remainder = tokens[1:]
    if remainder and prefix in _BOOL_CORE_PREFIXES:
        return f"the value {prefix} {words_phrase(remainder, lexicon=lexicon)}"
    if remainder and prefix == "use":
        return f"the {words_phrase(remainder, lexicon=lexicon)} is used"
    return f"the {words_phrase(tokens, lexicon=lexicon)} is set"
