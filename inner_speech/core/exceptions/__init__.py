"""
Custom Exceptions
=================

This module defines all custom exceptions for the Inner Speech data toolkit.

Exception Hierarchy:
-------------------
InnerSpeechError (Base)
├── DataError
│   ├── InvalidInputError
│   │   └── InvalidDatatypeError
│   ├── DataLoadError
│   │   └── DataNotFoundError
│   ├── DeserializationError
│   └── DimensionMismatchError
└── ConfigurationError
    ├── ConfigNotFoundError
    └── MissingConfigError

Every extraction surfaces the first error it meets to its caller. The
aggregators never return partial results: one failing block or subject
aborts the whole call with the error raised by the failing extractor.

Example Usage:
    ```python
    from inner_speech.core.exceptions import DataNotFoundError, InvalidDatatypeError

    try:
        X, Y = extract_data_from_subject(root, 3, 'eeg')
    except DataNotFoundError as e:
        logger.error(f"Missing file: {e.file_path}")
    ```
"""


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class InnerSpeechError(Exception):
    """
    Base exception for all toolkit errors.

    Provides consistent error message formatting.

    Attributes:
        message: Error message
        details: Additional error details
        suggestion: Suggestion for fixing the error
    """

    def __init__(self,
                 message: str,
                 details: str = '',
                 suggestion: str = ''):
        self.message = message
        self.details = details
        self.suggestion = suggestion

        full_message = message
        if details:
            full_message += f"\nDetails: {details}"
        if suggestion:
            full_message += f"\nSuggestion: {suggestion}"

        super().__init__(full_message)


# =============================================================================
# DATA ERRORS
# =============================================================================

class DataError(InnerSpeechError):
    """Base exception for data-related errors."""
    pass


class InvalidInputError(DataError):
    """Raised when an argument is outside the accepted domain."""

    def __init__(self,
                 field: str,
                 expected: str,
                 actual: object):
        message = f"Invalid value for '{field}'"
        details = f"Expected: {expected}, Got: {actual!r}"
        suggestion = "Check the arguments passed to the extraction call."

        super().__init__(message, details, suggestion)
        self.field = field
        self.expected = expected
        self.actual = actual


class InvalidDatatypeError(InvalidInputError):
    """Raised when a datatype token is not one of eeg, exg or baseline."""

    def __init__(self, datatype: object, valid: list = None):
        valid = valid or []
        super().__init__(
            'datatype',
            ' | '.join(valid) if valid else 'a known datatype',
            datatype
        )
        self.datatype = datatype
        self.valid = valid


class DataLoadError(DataError):
    """Raised when data cannot be read from a file."""

    def __init__(self,
                 file_path: str,
                 reason: str = 'Unknown error',
                 original_error: Exception = None):
        message = f"Failed to load data from '{file_path}'"
        details = reason

        if original_error:
            details += f" (Original error: {original_error})"

        suggestion = "Check that the file exists and has the correct format."

        super().__init__(message, details, suggestion)
        self.file_path = str(file_path)
        self.reason = reason
        self.original_error = original_error


class DataNotFoundError(DataLoadError):
    """Raised when no file exists at a resolved dataset path."""

    def __init__(self, file_path: str, kind: str = 'file'):
        super().__init__(file_path, f"{kind} not found")
        self.suggestion = (
            "Check the dataset root and that the derivatives were generated "
            "for this subject and block."
        )
        self.kind = kind


class DeserializationError(DataError):
    """Raised when a file exists but its content cannot be decoded."""

    def __init__(self,
                 file_path: str,
                 reason: str = '',
                 original_error: Exception = None):
        message = f"Malformed content in '{file_path}'"
        details = reason
        if original_error:
            details += f" (Original error: {original_error})"
        suggestion = "The file may be truncated or written by an incompatible version."

        super().__init__(message, details, suggestion)
        self.file_path = str(file_path)
        self.original_error = original_error


class DimensionMismatchError(DataError):
    """Raised when arrays cannot be stacked or are not row aligned."""

    def __init__(self,
                 operation: str,
                 shapes: list):
        message = f"Incompatible array shapes in '{operation}'"
        details = f"Shapes: {[tuple(s) for s in shapes]}"
        suggestion = "All blocks and subjects must share channel and sample counts."

        super().__init__(message, details, suggestion)
        self.operation = operation
        self.shapes = [tuple(s) for s in shapes]


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(InnerSpeechError):
    """Base exception for configuration errors."""
    pass


class ConfigNotFoundError(ConfigurationError):
    """Raised when configuration file is not found."""

    def __init__(self, path: str):
        message = f"Configuration file not found: '{path}'"
        suggestion = "Check the path or create the configuration file."

        super().__init__(message, '', suggestion)
        self.path = path


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(self, key: str):
        message = f"Required configuration '{key}' is missing"
        suggestion = f"Pass the value explicitly or set '{key}' in the configuration."

        super().__init__(message, '', suggestion)
        self.key = key


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    'InnerSpeechError',

    # Data
    'DataError',
    'InvalidInputError',
    'InvalidDatatypeError',
    'DataLoadError',
    'DataNotFoundError',
    'DeserializationError',
    'DimensionMismatchError',

    # Configuration
    'ConfigurationError',
    'ConfigNotFoundError',
    'MissingConfigError',
]
