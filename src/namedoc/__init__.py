"""Rule-based documentation sentences synthesized from identifier names."""

from __future__ import annotations

from namedoc import builder as builder
from namedoc import config as config
from namedoc import errors as errors
from namedoc import lexicon as lexicon
from namedoc import logging as logging
from namedoc import payload as payload
from namedoc import phrases as phrases
from namedoc import render as render
from namedoc import schema as schema
from namedoc import symbols as symbols
from namedoc import tokenizer as tokenizer
from namedoc.builder import DocumentationResult, build_documentation, document_symbol
from namedoc.config import BuilderConfig, load_config
from namedoc.render import format_xml_doc, normalize_sentence
from namedoc.schema import DocEntry, DocTag, DocumentationModel
from namedoc.symbols import SymbolDescriptor, SymbolKind
from namedoc.tokenizer import tokenize

__version__ = "1.0.0"

__all__ = [
    "BuilderConfig",
    "DocEntry",
    "DocTag",
    "DocumentationModel",
    "DocumentationResult",
    "SymbolDescriptor",
    "SymbolKind",
    "__version__",
    "build_documentation",
    "builder",
    "config",
    "document_symbol",
    "errors",
    "format_xml_doc",
    "lexicon",
    "load_config",
    "logging",
    "normalize_sentence",
    "payload",
    "phrases",
    "render",
    "schema",
    "symbols",
    "tokenize",
    "tokenizer",
]
