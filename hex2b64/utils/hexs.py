"""
Hexadecimal string decoding.

Turns a string of hex digit pairs into the bytes they spell. Both upper and
lower case digits are accepted. Decoding is all-or-nothing: on failure one of
the errors from `hex2b64.errors` is raised and no bytes are returned.
"""

import string

from hex2b64.errors import InvalidDigitError, OddLengthError

HEX_DIGITS = frozenset(string.hexdigits)

def hex_to_bytes(text: str) -> bytes:
    """
    Decode a hex string into bytes.

    Args:
        text: Hex string, two digits per output byte

    Returns:
        bytes: The decoded bytes, in input order

    Raises:
        OddLengthError: text has an odd number of characters
        InvalidDigitError: a window holds a non-hex character
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if len(text) % 2 != 0:
        raise OddLengthError()

    decoded = bytearray()
    for offset in range(0, len(text), 2):
        window = text[offset:offset + 2]
        # int() alone would let through signs, whitespace, underscores and non-ASCII digits
        bad_chars = set(window) - HEX_DIGITS
        if bad_chars:
            cause = ValueError(f"non-hex characters {''.join(sorted(bad_chars))!r} in {window!r}")
            raise InvalidDigitError(window, offset) from cause
        decoded.append(int(window, 16))
    return bytes(decoded)
