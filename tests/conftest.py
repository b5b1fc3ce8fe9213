"""Shared pytest fixtures for namedoc tests.

This module provides reusable fixtures for:
- Symbol descriptor factories per symbol kind
- Isolation of the correlation ID context and ``NAMEDOC_CONFIG``
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol

import pytest

REPO_ROOT: Final[Path] = Path(__file__).resolve().parent.parent
SRC_PATH: Final[Path] = REPO_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from namedoc.logging import set_correlation_id  # noqa: E402
from namedoc.symbols import SymbolDescriptor, SymbolKind  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterator


class DescriptorFactory(Protocol):
    """Callable building a descriptor of a fixed kind."""

    def __call__(self, name: str = ..., **fields: object) -> SymbolDescriptor: ...


def _factory(kind: SymbolKind) -> DescriptorFactory:
    def build(name: str = "", **fields: object) -> SymbolDescriptor:
        return SymbolDescriptor(kind, name, **fields)  # type: ignore[arg-type]

    return build


@pytest.fixture
def make_type() -> DescriptorFactory:
    """Return a factory for type descriptors."""
    return _factory(SymbolKind.TYPE)


@pytest.fixture
def make_method() -> DescriptorFactory:
    """Return a factory for method descriptors."""
    return _factory(SymbolKind.METHOD)


@pytest.fixture
def make_property() -> DescriptorFactory:
    """Return a factory for property descriptors."""
    return _factory(SymbolKind.PROPERTY)


@pytest.fixture
def make_field() -> DescriptorFactory:
    """Return a factory for field descriptors."""
    return _factory(SymbolKind.FIELD)


@pytest.fixture
def make_event() -> DescriptorFactory:
    """Return a factory for event descriptors."""
    return _factory(SymbolKind.EVENT)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear ``NAMEDOC_CONFIG`` and the correlation ID around every test."""
    monkeypatch.delenv("NAMEDOC_CONFIG", raising=False)
    set_correlation_id(None)
    yield
    set_correlation_id(None)
