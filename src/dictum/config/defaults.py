"""Default configuration values for Dictum."""

# Extraction configuration defaults
DEFAULT_EXTRACTION_CONFIG: dict[str, str | bool] = {
    "quote_style": "auto",
    "paragraph_split": "line",
    "output_format": "json",
    "verbose": False,
    "quiet": False,
}

# File names searched for project-level configuration, in preference order
PROJECT_CONFIG_NAMES: tuple[str, ...] = ("dictum.yml", "dictum.yaml")

# User-level configuration directory (under the home directory)
USER_CONFIG_DIR = ".dictum"
