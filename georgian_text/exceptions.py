"""Exceptions raised by georgian_text."""

from __future__ import annotations


class GeorgianTextError(Exception):
    """Base class for all georgian_text errors."""


class InvalidInputLengthError(GeorgianTextError, ValueError):
    """Raised when a UTF-16 buffer does not hold whole code units."""


class InvalidInputTypeError(GeorgianTextError, TypeError):
    """Raised when an input value has an unsupported type."""


class InputTooLongError(GeorgianTextError, ValueError):
    """Raised when text exceeds the allowed maximum length."""


class InvalidOptionsError(GeorgianTextError, ValueError):
    """Raised when conversion options fail validation."""


class CodeUnitOutOfRangeError(GeorgianTextError, ValueError):
    """Raised when a code unit does not fit in 16 bits."""
