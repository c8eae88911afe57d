"""Tests for configuration validation helpers."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from dictum.config.validator import flatten_pydantic_errors
from dictum.models.config import ExtractionConfig


@pytest.mark.unit
class TestFlattenPydanticErrors:
    """Tests for flatten_pydantic_errors."""

    def test_invalid_literal_names_field_and_value(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            ExtractionConfig(output_format="xml")
        messages = flatten_pydantic_errors(exc_info.value)
        assert len(messages) == 1
        assert messages[0].startswith("Field 'output_format':")
        assert "'xml'" in messages[0]

    def test_unknown_setting(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            ExtractionConfig(colour="blue")
        messages = flatten_pydantic_errors(exc_info.value)
        assert messages == ["Field 'colour': unknown setting"]

    def test_multiple_errors(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            ExtractionConfig(output_format="xml", quote_style="curly")
        assert len(flatten_pydantic_errors(exc_info.value)) == 2
