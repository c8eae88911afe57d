"""Pydantic models for Dictum configuration."""

from dictum.models.config import ExtractionConfig

__all__ = ["ExtractionConfig"]
