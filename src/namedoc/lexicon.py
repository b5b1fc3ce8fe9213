"""Lexical tables and English verb conjugation for identifier phrasing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

__all__ = [
    "BOOL_PREFIXES",
    "DEFAULT_LEXICON",
    "IRREGULAR_VERBS",
    "KNOWN_ACRONYMS",
    "KNOWN_VERBS",
    "Lexicon",
    "has_bool_prefix",
    "is_known_acronym",
    "is_known_verb",
    "third_person_singular",
]

KNOWN_VERBS: tuple[str, ...] = (
    # Accessors and collections
    "Get", "Set", "Add", "Remove", "Delete", "Clear",
    "Find", "Search", "Lookup", "Resolve",
    "Create", "Build", "Generate", "Construct",
    "Update", "Refresh", "Reload",
    # Persistence
    "Load", "Save", "Read", "Write", "Unload", "Restore",
    "Open", "Close",
    # Lifecycle
    "Start", "Stop", "Begin", "End",
    "Reset", "Restart",
    "Initialize", "Init", "Finalize", "Terminate",
    # Restructuring
    "Insert", "Append", "Prepend", "Merge", "Split", "Join",
    "Move", "Copy", "Clone", "Replace",
    "Calculate", "Compute", "Evaluate", "Measure",
    "Convert", "Cast", "Map",
    "Format", "Parse", "Serialize", "Deserialize",
    # Messaging
    "Send", "Post", "Publish", "Dispatch",
    "Receive", "Subscribe", "Unsubscribe",
    # Presentation
    "Render", "Draw", "Paint", "Layout",
    "Validate", "Verify", "Check", "Ensure",
    "Register", "Unregister",
    "Enable", "Disable", "Activate", "Deactivate",
    "Execute", "Invoke", "Call", "Raise", "Handle",
    "Schedule", "Cancel", "Abort",
    "Lock", "Unlock",
    "Attach", "Detach",
    "Authorize", "Authenticate",
    "Extract",
    "Protect", "Unprotect",
    "Import", "Export",
    "Press", "Release", "Toggle",
    "Swap", "Match",
)  # fmt: skip

KNOWN_ACRONYMS: tuple[str, ...] = (
    "ID", "UID",
    "XML", "HTML", "JSON", "YAML",
    "URI", "URL",
    "CPU", "GPU", "RAM", "ROM",
    "UI", "UX",
    "DB", "SQL",
    "IO",
    "IP", "TCP", "UDP", "HTTP", "HTTPS",
    "RGB", "RGBA",
    "VM", "OS",
    "VS",
)  # fmt: skip

IRREGULAR_VERBS: Mapping[str, str] = MappingProxyType(
    {
        "be": "is",
        "have": "has",
        "do": "does",
        "go": "goes",
    }
)

BOOL_PREFIXES: tuple[str, ...] = (
    "is",
    "has",
    "can",
    "should",
    "must",
    "needs",
    "allows",
    "supports",
)

_ES_SUFFIXES = ("s", "sh", "ch", "x", "z", "o")
_VOWELS = frozenset("aeiou")


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Immutable verb, acronym and irregular-verb tables.

    Lookups are case-insensitive: verbs and irregular-verb keys are stored in
    lowercase, acronyms in uppercase.

    Attributes
    ----------
    verbs : frozenset[str]
        Known base verbs, lowercased.
    acronyms : frozenset[str]
        Known acronyms, uppercased.
    irregular_verbs : Mapping[str, str]
        Base verb (lowercase) to third-person singular form.
    """

    verbs: frozenset[str]
    acronyms: frozenset[str]
    irregular_verbs: Mapping[str, str] = field(hash=False)

    @classmethod
    def from_words(
        cls,
        verbs: Iterable[str],
        acronyms: Iterable[str],
        irregular_verbs: Mapping[str, str],
    ) -> Lexicon:
        """Build a lexicon, folding every entry to its canonical case."""
        return cls(
            verbs=frozenset(verb.lower() for verb in verbs),
            acronyms=frozenset(acronym.upper() for acronym in acronyms),
            irregular_verbs=MappingProxyType(
                {base.lower(): form for base, form in irregular_verbs.items()}
            ),
        )

    def extended(
        self,
        *,
        verbs: Iterable[str] = (),
        acronyms: Iterable[str] = (),
        irregular_verbs: Mapping[str, str] | None = None,
    ) -> Lexicon:
        """Return a new lexicon with the given entries added to this one."""
        return Lexicon.from_words(
            verbs=[*self.verbs, *verbs],
            acronyms=[*self.acronyms, *acronyms],
            irregular_verbs={**self.irregular_verbs, **(irregular_verbs or {})},
        )

    def is_known_verb(self, token: str) -> bool:
        """Return True when ``token`` is a known base verb (any casing)."""
        return token.lower() in self.verbs

    def is_known_acronym(self, token: str) -> bool:
        """Return True when ``token`` is all uppercase letters and a known acronym."""
        return token.isalpha() and token.isupper() and token.upper() in self.acronyms

    def third_person_singular(self, verb: str) -> str:
        """Conjugate ``verb`` to the third-person singular present tense.

        Irregular verbs are looked up first. Regular verbs keep the casing of
        their stem, so ``"Load"`` becomes ``"Loads"``.

        Parameters
        ----------
        verb : str
            Base form of the verb.

        Returns
        -------
        str
            Conjugated verb, or an empty string for empty input.
        """
        if not verb:
            return ""
        irregular = self.irregular_verbs.get(verb.lower())
        if irregular is not None:
            return irregular
        lower = verb.lower()
        if lower.endswith(_ES_SUFFIXES):
            return verb + "es"
        if len(lower) > 1 and lower.endswith("y") and lower[-2] not in _VOWELS:
            return verb[:-1] + "ies"
        return verb + "s"


DEFAULT_LEXICON = Lexicon.from_words(KNOWN_VERBS, KNOWN_ACRONYMS, IRREGULAR_VERBS)


def third_person_singular(verb: str, *, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Conjugate ``verb`` with ``lexicon`` (see :meth:`Lexicon.third_person_singular`)."""
    return lexicon.third_person_singular(verb)


def is_known_verb(token: str, *, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    """Return True when ``token`` is a known verb."""
    return lexicon.is_known_verb(token)


def is_known_acronym(token: str, *, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    """Return True when ``token`` is an uppercase known acronym."""
    return lexicon.is_known_acronym(token)


def has_bool_prefix(tokens: Sequence[str]) -> bool:
    """Return True when ``tokens`` start with a bool prefix and continue after it.

    Examples
    --------
    >>> has_bool_prefix(["Is", "Enabled"])
    True
    >>> has_bool_prefix(["Is"])
    False
    """
    return len(tokens) >= 2 and tokens[0].lower() in BOOL_PREFIXES
