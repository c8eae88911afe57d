"""Dictum - extract defined terms and their definitions from legal prose.

Given the paragraphs of a statute or regulation, Dictum finds the paragraphs
that define a term ("'Person' means any individual ...") and returns a table
mapping each defined term to its definition text.

Main features:
- Straight or directional quote detection per document
- Fixed, ordered vocabulary of linking phrases
- Acronym-preserving term normalization
- Merging of repeated and split definitions
- YAML configuration and a ``dictum extract`` command
"""

__version__ = "0.1.0"

from dictum.lib.definition_extractor import (  # noqa: E402
    LINKING_PHRASES,
    DefinitionEntry,
    DefinitionExtractor,
    QuoteStyle,
    build_entries,
    extract,
)
from dictum.lib.errors import ConfigError, DictumError  # noqa: E402

__all__ = [
    "__version__",
    "LINKING_PHRASES",
    "ConfigError",
    "DefinitionEntry",
    "DefinitionExtractor",
    "DictumError",
    "QuoteStyle",
    "build_entries",
    "extract",
]
