"""Split programming identifiers into word tokens.

Boundaries are inserted before the triggering character while scanning left to
right:

* ``_`` and ``-`` end the current token and are dropped;
* a lowercase letter followed by an uppercase letter (``getValue``);
* a letter followed by a digit, or a digit followed by a letter (``Value2Name``);
* inside an uppercase run followed by a lowercase letter, before the last
  uppercase letter of the run (``XMLDocument`` -> ``XML``, ``Document``).

Examples
--------
>>> tokenize("getHTTPResponseCode")
['get', 'HTTP', 'Response', 'Code']
>>> tokenize("HTTPSPort")[0].position
0
"""

from __future__ import annotations

from typing import Self

__all__ = ["SEPARATORS", "Token", "split_identifier", "tokenize"]

SEPARATORS = frozenset("_-")


class Token(str):
    """Word token that remembers its offset in the source identifier.

    Tokens behave as plain strings (original casing preserved), so they compare
    equal to ``str`` values and can be joined or sliced directly.

    Attributes
    ----------
    position : int
        Character offset of the token within the identifier.
    """

    position: int

    def __new__(cls, text: str, position: int = 0) -> Self:
        token = super().__new__(cls, text)
        token.position = position
        return token

    def __repr__(self) -> str:
        return str.__repr__(self)

    def __reduce__(self) -> tuple[type[Token], tuple[str, int]]:
        return (type(self), (str(self), self.position))


def _is_boundary(name: str, index: int) -> bool:
    prev = name[index - 1]
    current = name[index]
    if prev.islower() and current.isupper():
        return True
    if (prev.isalpha() and current.isdigit()) or (prev.isdigit() and current.isalpha()):
        return True
    if prev.isupper() and current.isupper():
        following = index + 1
        return following < len(name) and name[following].islower()
    return False


def tokenize(name: str | None) -> list[Token]:
    """Split ``name`` into tokens at casing, digit, acronym and separator boundaries.

    Parameters
    ----------
    name : str | None
        Raw identifier. ``None`` and blank strings yield no tokens.

    Returns
    -------
    list[Token]
        Non-empty tokens in left-to-right order, original casing preserved.
    """
    if not name or name.isspace():
        return []

    tokens: list[Token] = []
    start = 0
    for index, char in enumerate(name):
        if char in SEPARATORS:
            if index > start:
                tokens.append(Token(name[start:index], start))
            start = index + 1
            continue
        if index == start:
            continue
        if _is_boundary(name, index):
            tokens.append(Token(name[start:index], start))
            start = index
    if len(name) > start:
        tokens.append(Token(name[start:], start))
    return tokens


def split_identifier(name: str | None) -> list[str]:
    """Return the tokens of ``name`` as plain strings."""
    return [str(token) for token in tokenize(name)]
