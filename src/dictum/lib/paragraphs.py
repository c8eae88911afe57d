"""Turn raw document text into the paragraph sequence the extractor expects.

Paragraph segmentation is the caller's job; these helpers cover the simple
layouts the CLI accepts:

- ``line``: every non-blank line is a paragraph
- ``blank_line``: paragraphs are separated by blank lines, wrapped lines
  inside a paragraph are joined with a single space
- ``json``: the input is a JSON array of paragraph strings
"""

import json
import re
import sys
from pathlib import Path
from typing import Literal

from dictum.lib.errors import FileNotFoundError, InputFormatError
from dictum.lib.logging_config import get_logger

logger = get_logger(__name__)

ParagraphSplit = Literal["line", "blank_line", "json"]

BLANK_LINE_PATTERN = re.compile(r"\n\s*\n")


def split_paragraphs(text: str, mode: ParagraphSplit = "line") -> list[str]:
    """Split document text into paragraphs.

    Args:
        text: Full document text.
        mode: Segmentation layout, see module docstring.

    Returns:
        Paragraph strings in document order.

    Raises:
        InputFormatError: If ``mode`` is "json" and the text is not a JSON
            array of strings, or if ``mode`` is unknown.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    if mode == "line":
        return [line.strip() for line in text.split("\n") if line.strip()]

    if mode == "blank_line":
        paragraphs = []
        for block in BLANK_LINE_PATTERN.split(text):
            lines = [line.strip() for line in block.split("\n") if line.strip()]
            if lines:
                paragraphs.append(" ".join(lines))
        return paragraphs

    if mode == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputFormatError(f"Invalid JSON paragraph input: {e}") from e
        if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
            raise InputFormatError("JSON paragraph input must be an array of strings")
        return data

    raise InputFormatError(f"Unknown paragraph split mode: {mode!r}")


def read_paragraphs(source: str, mode: ParagraphSplit = "line") -> list[str]:
    """Read paragraphs from a file path, or from stdin when ``source`` is "-".

    Args:
        source: File path or "-".
        mode: Segmentation layout passed to ``split_paragraphs``.

    Returns:
        Paragraph strings in document order.

    Raises:
        FileNotFoundError: If the file cannot be read.
        InputFormatError: If the content is not UTF-8 or does not match
            ``mode``.
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputFormatError(f"Paragraph input {source} is not UTF-8: {e}") from e
    except OSError as e:
        raise FileNotFoundError(
            source, f"Could not read paragraph input: {e.strerror or e}"
        ) from e

    paragraphs = split_paragraphs(text, mode)
    logger.debug(f"Read {len(paragraphs)} paragraphs from {source} ({mode})")
    return paragraphs
