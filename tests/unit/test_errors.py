"""Tests for custom exception hierarchy in dictum.lib.errors."""

from dictum.lib.errors import (
    ConfigError,
    DictumError,
    FileNotFoundError,
    InputFormatError,
    OutputError,
)


class TestDictumError:
    """Tests for base DictumError exception."""

    def test_dictum_error_creates_with_message(self) -> None:
        """Test that DictumError can be created with a message."""
        error = DictumError("Test error message")
        assert str(error) == "Test error message"

    def test_dictum_error_is_exception(self) -> None:
        """Test that DictumError is an Exception subclass."""
        assert isinstance(DictumError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("output_format", "Field 'output_format' is invalid")
        assert "output_format" in str(error)
        assert "invalid" in str(error).lower()
        assert error.field == "output_format"

    def test_config_error_is_dictum_error(self) -> None:
        assert isinstance(ConfigError("field", "message"), DictumError)


class TestFileNotFoundError:
    """Tests for FileNotFoundError exception."""

    def test_includes_path(self) -> None:
        error = FileNotFoundError("/tmp/doc.txt", "Could not read")
        assert "/tmp/doc.txt" in str(error)
        assert error.path == "/tmp/doc.txt"

    def test_does_not_shadow_builtin_hierarchy(self) -> None:
        """The Dictum error is not an OSError."""
        error = FileNotFoundError("/tmp/doc.txt", "Could not read")
        assert isinstance(error, DictumError)
        assert not isinstance(error, OSError)


class TestInputFormatError:
    """Tests for InputFormatError exception."""

    def test_message(self) -> None:
        error = InputFormatError("bad input")
        assert str(error) == "bad input"
        assert error.message == "bad input"
        assert isinstance(error, DictumError)


class TestOutputError:
    """Tests for OutputError exception."""

    def test_includes_path_and_reason(self) -> None:
        error = OutputError("/tmp/out/terms.json", "No such file or directory")
        assert str(error) == (
            "Could not write /tmp/out/terms.json: No such file or directory"
        )
        assert error.path == "/tmp/out/terms.json"
        assert isinstance(error, DictumError)
