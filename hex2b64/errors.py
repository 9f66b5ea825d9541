"""
Custom exception classes for hex decoding failures.

This module defines the exception hierarchy raised by the hex decoder when an
input string cannot be turned into bytes. The Base64 encoder is total and
raises nothing from here.
"""

class CustomError(Exception):
    """Base class for all custom exceptions in the application."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message

class DecodeHexError(CustomError, ValueError):
    """Raised when a hex string cannot be decoded into bytes."""

class OddLengthError(DecodeHexError):
    """Raised when the hex string has an odd number of characters."""
    def __init__(self, message="input string has an odd number of bytes"):
        super().__init__(message)

class InvalidDigitError(DecodeHexError):
    """
    Raised when a two-character window holds a character outside 0-9A-Fa-f.

    Attributes:
        window: The offending two-character window
        offset: Character offset of the window in the input string
    """
    def __init__(self, window, offset, message="invalid digit found in string"):
        super().__init__(message)
        self.window = window
        self.offset = offset
