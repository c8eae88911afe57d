"""Extraction configuration model.

Every field is optional so that a config file, environment variables and
CLI flags can each supply a partial layer; the loader merges the layers and
fills the gaps from ``DEFAULT_EXTRACTION_CONFIG``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from dictum.lib.definition_extractor import QuoteStyle


class ExtractionConfig(BaseModel):
    """Settings for an extraction run and how its result is written."""

    model_config = ConfigDict(extra="forbid")

    quote_style: Literal["auto", "straight", "directional"] | None = Field(
        default=None,
        description="Force a quote style, or 'auto' to detect it per document",
    )
    paragraph_split: Literal["line", "blank_line", "json"] | None = Field(
        default=None,
        description="How input text is divided into paragraphs",
    )
    output_format: Literal["json", "yaml", "text"] | None = Field(
        default=None,
        description="Serialization of the definition table",
    )
    verbose: bool | None = None
    quiet: bool | None = None

    def resolved_quote_style(self) -> QuoteStyle | None:
        """Return the forced QuoteStyle, or None when detection should run."""
        if self.quote_style in (None, "auto"):
            return None
        return QuoteStyle(self.quote_style)
