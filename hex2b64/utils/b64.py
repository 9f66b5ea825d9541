"""
Base64 encoding of raw bytes.

Standard alphabet with '=' padding. Every 3 input bytes become 4 output
characters; a short final group is zero-filled for bit packing and then
padded so the output length is always a multiple of 4.
"""

BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD_CHAR = "="

def bytes_to_base64(data) -> str:
    """
    Encode bytes to Base64 text.

    Args:
        data: bytes, bytearray, memoryview or any sequence of ints in [0, 255]

    Returns:
        str: Base64 text, empty for empty input

    Raises:
        TypeError: data is an int (bytes() would turn it into that many zero bytes)
    """
    if isinstance(data, int):
        raise TypeError(f"expected bytes-like object, got {type(data).__name__}")
    data = bytes(data)
    encoded = []
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        b0 = chunk[0]
        b1 = chunk[1] if len(chunk) > 1 else 0
        b2 = chunk[2] if len(chunk) > 2 else 0

        encoded.append(BASE64_CHARS[b0 >> 2])
        encoded.append(BASE64_CHARS[((b0 & 0x03) << 4) | (b1 >> 4)])
        if len(chunk) > 1:
            encoded.append(BASE64_CHARS[((b1 & 0x0F) << 2) | (b2 >> 6)])
        else:
            encoded.append(PAD_CHAR)
        if len(chunk) > 2:
            encoded.append(BASE64_CHARS[b2 & 0x3F])
        else:
            encoded.append(PAD_CHAR)
    return ''.join(encoded)
