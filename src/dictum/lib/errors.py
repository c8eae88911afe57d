"""Custom exception hierarchy for Dictum configuration and input handling.

The extractor itself never raises for problems in the text it reads; these
exceptions belong to the layers around it (configuration, file input, CLI).
"""


class DictumError(Exception):
    """Base exception for all Dictum errors.

    All Dictum-specific exceptions inherit from this class, enabling
    centralized exception handling.
    """

    pass


class ConfigError(DictumError):
    """Exception raised for configuration errors.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(DictumError):
    """Exception raised when an input or configuration file is missing.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class InputFormatError(DictumError):
    """Exception raised when paragraph input cannot be decoded."""

    def __init__(self, message: str) -> None:
        """Create an input format error."""
        self.message = message
        super().__init__(message)


class OutputError(DictumError):
    """Exception raised when extraction results cannot be written.

    Attributes:
        path: Destination that could not be written
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize OutputError with destination and message."""
        self.path = path
        self.message = message
        super().__init__(f"Could not write {path}: {message}")
