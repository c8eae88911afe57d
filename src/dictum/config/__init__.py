"""Configuration loading and validation for Dictum.

Main components:
- ConfigLoader: Load extraction settings from YAML files
- Layered resolution: CLI flags, config files, DICTUM_* environment
  variables and built-in defaults
"""

from dictum.config.loader import ConfigLoader

__all__ = ["ConfigLoader"]
