"""Hex string to Base64 text conversion."""

from hex2b64.errors import DecodeHexError, InvalidDigitError, OddLengthError
from hex2b64.utils.b64 import bytes_to_base64
from hex2b64.utils.hexs import hex_to_bytes

__version__ = "0.1.0"
