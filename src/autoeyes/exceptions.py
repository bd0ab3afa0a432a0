"""Custom exception classes for AutoEyes.

This module defines custom exceptions used throughout the application to provide
clear error messages and facilitate error handling. Absence of a match is never
signalled with an exception; searches and waits return ``None`` or an empty list.
"""


class AutoEyesError(Exception):
    """Base exception class for all AutoEyes errors."""

    pass


class InvalidPatternError(AutoEyesError):
    """Raised when a pattern is too generic for multi-match search.

    No erasure fill could be built that the matcher rejects for the given
    pattern and threshold, so found occurrences cannot be suppressed safely.
    """

    pass


class PatternLoadError(AutoEyesError):
    """Raised when a pattern image cannot be read from disk."""

    pass


class CaptureError(AutoEyesError):
    """Raised when the window to capture cannot be found."""

    pass


class OverlayError(AutoEyesError):
    """Raised when the overlay is used outside its open/close lifecycle."""

    pass
