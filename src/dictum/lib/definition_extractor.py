"""Definition extraction from segmented legal prose.

This module finds paragraphs that introduce a defined term, pulls the quoted
term(s) out of them and builds a table mapping each normalized term to the
text that defines it.

Extraction is a single deterministic pass:

1. Decide the quote style (straight or directional) once for the whole batch.
2. For each paragraph: strip inline markup, skip it unless it contains the
   style's quote character, and look for the first linking phrase
   (" means ", " shall include ", ...).
3. Collect the quoted candidates of a matching paragraph, normalize them and
   file them under the paragraph text starting at its first opening quote.

Example:
    >>> extract(['"Person" means any individual.'])
    {'person': '"Person" means any individual.'}
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from dictum.lib.logging_config import get_logger

logger = get_logger(__name__)

# Paragraph text that looks like a path or URL is still parsed as markup
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

STRAIGHT_QUOTE = '"'
LEFT_QUOTE = "“"
RIGHT_QUOTE = "”"

# Order matters: the first phrase found in a paragraph wins.
LINKING_PHRASES: tuple[str, ...] = (
    " mean ",
    " means ",
    " shall include ",
    " includes ",
    " has the same meaning as ",
    " shall be construed ",
    " shall also be construed to mean ",
)

# Noise words from lists such as '"apples", "pears" and "plums"'
CONJUNCTIONS = frozenset({"and", "or"})

TERM_PATTERN = re.compile(
    rf"[{STRAIGHT_QUOTE}{LEFT_QUOTE}]"
    r"([A-Za-z][A-Za-z,'\s-]*[A-Za-z])"
    rf"[{STRAIGHT_QUOTE}{RIGHT_QUOTE}]"
)


class QuoteStyle(str, Enum):
    """Quotation convention used by a batch of paragraphs.

    Attributes:
        STRAIGHT: ASCII double quote for both opening and closing.
        DIRECTIONAL: Curly left/right double quotes.
    """

    STRAIGHT = "straight"
    DIRECTIONAL = "directional"

    @property
    def opening(self) -> str:
        """Character that opens a quoted term."""
        return STRAIGHT_QUOTE if self is QuoteStyle.STRAIGHT else LEFT_QUOTE

    @property
    def closing(self) -> str:
        """Character that closes a quoted term."""
        return STRAIGHT_QUOTE if self is QuoteStyle.STRAIGHT else RIGHT_QUOTE

    @property
    def sample(self) -> str:
        """Character a paragraph must contain to be a definition candidate."""
        return self.closing


@dataclass(frozen=True)
class ExtractionContext:
    """Run-scoped settings, fixed before the first paragraph is scanned.

    Attributes:
        quote_style: Quote style applied to every paragraph of the run.
        linking_phrases: Ordered phrases that link a term to its definition.
    """

    quote_style: QuoteStyle
    linking_phrases: tuple[str, ...] = LINKING_PHRASES


@dataclass
class DefinitionEntry:
    """An extracted definition as a standalone record.

    Attributes:
        id: Identifier derived from the source path and the term
        source_path: Path of the document the definition came from
        term: The normalized defined term
        definition_text: Text defining the term

    Example:
        >>> entry = DefinitionEntry(
        ...     id="code_txt_def_motor_vehicle",
        ...     source_path="code.txt",
        ...     term="motor vehicle",
        ...     definition_text='"Motor vehicle" means every vehicle...',
        ... )
    """

    id: str
    source_path: str
    term: str
    definition_text: str


class DefinitionTable:
    """Accumulates term to definition text mappings for one run.

    A term seen again with the same (whitespace-trimmed) text is ignored.
    A term seen again with different text gets the new text appended after
    a single space, which keeps e.g. an affirmative definition and a later
    exclusion together.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, str] = {}

    def add(self, term: str, text: str) -> None:
        """File ``text`` under ``term``."""
        existing = self._definitions.get(term)
        if existing is None:
            self._definitions[term] = text
        elif existing.strip() != text.strip():
            self._definitions[term] = f"{existing} {text}"

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, term: object) -> bool:
        return term in self._definitions

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the accumulated definitions."""
        return dict(self._definitions)


def detect_quote_style(paragraphs: Iterable[str]) -> QuoteStyle:
    """Pick the quote style used by a batch of paragraphs.

    Only the closing curly quote is counted, so its count is doubled before
    comparing it with the straight quote count.

    Args:
        paragraphs: Raw paragraph texts of the whole batch.

    Returns:
        STRAIGHT when straight quotes outnumber twice the closing curly
        quotes, DIRECTIONAL otherwise.
    """
    straight = 0
    directional = 0
    for paragraph in paragraphs:
        straight += paragraph.count(STRAIGHT_QUOTE)
        directional += paragraph.count(RIGHT_QUOTE)

    style = (
        QuoteStyle.STRAIGHT if straight > directional * 2 else QuoteStyle.DIRECTIONAL
    )
    logger.debug(
        f"Quote style {style.value}: {straight} straight, "
        f"{directional} closing directional"
    )
    return style


def strip_markup(text: str) -> str:
    """Remove inline tags from a paragraph.

    Entities such as ``&amp;`` are left as they are. Malformed markup never
    raises; whatever text the parser recovers is returned.
    """
    if "<" not in text:
        return text

    soup = BeautifulSoup(text.replace("&", "&amp;"), "html.parser")
    return soup.get_text()


def find_linking_phrase(
    text: str, phrases: tuple[str, ...] = LINKING_PHRASES
) -> str | None:
    """Return the first phrase of ``phrases`` contained in ``text``."""
    for phrase in phrases:
        if phrase in text:
            return phrase
    return None


def find_candidate_terms(text: str) -> list[str]:
    """Return the contents of every quoted run that looks like a term.

    A term starts and ends with a letter and otherwise holds only letters,
    commas, apostrophes, hyphens and whitespace. The enclosing quotes are
    not part of the result.
    """
    return TERM_PATTERN.findall(text)


def normalize_term(candidate: str) -> str | None:
    """Normalize a quoted candidate into a table key.

    Candidates with any lowercase ASCII letter are lowercased entirely; all
    caps candidates are kept as they are, since they are acronyms such as
    "CA" that would otherwise match fragments of ordinary words.

    Args:
        candidate: Candidate text, with or without its enclosing quotes.

    Returns:
        The normalized term, or None when the candidate is a list
        conjunction or empty.
    """
    term = candidate.strip(STRAIGHT_QUOTE + LEFT_QUOTE + RIGHT_QUOTE).strip()

    if term in CONJUNCTIONS:
        return None

    if any("a" <= char <= "z" for char in term):
        term = term.lower()

    if term.endswith(","):
        term = term[:-1]

    if not term or term in CONJUNCTIONS:
        return None
    return term


def definition_text(text: str, style: QuoteStyle) -> str:
    """Drop any lead-in prose before the first opening quote of ``style``."""
    start = text.find(style.opening)
    if start < 0:
        return text
    return text[start:]


class DefinitionExtractor:
    """Extracts defined terms from an ordered batch of paragraphs.

    The extractor keeps no state between runs, so one instance can serve
    any number of documents, including concurrently.

    Attributes:
        quote_style: Optional quote style forced on every run. When None the
            style is detected from each batch.

    Example:
        >>> extractor = DefinitionExtractor()
        >>> extractor.extract(['"CA" means the Commonwealth of Appalachia.'])
        {'CA': '"CA" means the Commonwealth of Appalachia.'}
    """

    def __init__(self, quote_style: QuoteStyle | None = None) -> None:
        self.quote_style = quote_style

    def extract(self, paragraphs: Iterable[str] | str | None) -> dict[str, str] | None:
        """Build the definition table for a batch of paragraphs.

        Args:
            paragraphs: Paragraph texts in document order. A single string is
                treated as a one-paragraph batch.

        Returns:
            Mapping of normalized term to definition text, or None when no
            definition was found (including when ``paragraphs`` is None).
        """
        if paragraphs is None:
            logger.debug("No paragraphs supplied")
            return None
        if isinstance(paragraphs, str):
            paragraphs = [paragraphs]

        texts: list[str] = []
        for index, paragraph in enumerate(paragraphs):
            if isinstance(paragraph, str):
                texts.append(paragraph)
            else:
                logger.debug(f"Skipping non-text paragraph at index {index}")

        if not texts:
            return None

        context = ExtractionContext(
            quote_style=self.quote_style or detect_quote_style(texts)
        )
        table = DefinitionTable()
        for paragraph in texts:
            self._scan_paragraph(paragraph, context, table)

        if not table:
            logger.info(f"No definitions found in {len(texts)} paragraphs")
            return None

        logger.info(f"Extracted {len(table)} terms from {len(texts)} paragraphs")
        return table.as_dict()

    def _scan_paragraph(
        self, paragraph: str, context: ExtractionContext, table: DefinitionTable
    ) -> None:
        """File every term a single paragraph defines into ``table``."""
        cleaned = strip_markup(paragraph)
        if context.quote_style.sample not in cleaned:
            return

        phrase = find_linking_phrase(cleaned, context.linking_phrases)
        if phrase is None:
            return
        logger.debug(f"Linking phrase {phrase.strip()!r} in: {cleaned[:60]!r}")

        candidates = find_candidate_terms(cleaned)
        terms = [
            term
            for term in (normalize_term(candidate) for candidate in candidates)
            if term is not None
        ]
        if not terms:
            return

        text = definition_text(cleaned, context.quote_style)
        for term in terms:
            table.add(term, text)


def extract(
    paragraphs: Iterable[str] | str | None,
    *,
    quote_style: QuoteStyle | None = None,
) -> dict[str, str] | None:
    """Extract term definitions from paragraphs.

    Convenience wrapper around ``DefinitionExtractor(quote_style).extract``.
    """
    return DefinitionExtractor(quote_style=quote_style).extract(paragraphs)


def build_entries(
    definitions: Mapping[str, str], source_path: str = ""
) -> list[DefinitionEntry]:
    """Convert a definition table into records sorted by term.

    Args:
        definitions: Table returned by ``extract``.
        source_path: Document the table came from, used in entry IDs.

    Returns:
        One DefinitionEntry per term.
    """
    prefix = re.sub(r"[^a-z0-9]+", "_", source_path.lower()).strip("_")
    entries: list[DefinitionEntry] = []
    for term in sorted(definitions):
        slug = re.sub(r"[^a-z0-9]+", "_", term.lower()).strip("_")
        entry_id = f"{prefix}_def_{slug}" if prefix else f"def_{slug}"
        entries.append(
            DefinitionEntry(
                id=entry_id,
                source_path=source_path,
                term=term,
                definition_text=definitions[term],
            )
        )
    return entries
