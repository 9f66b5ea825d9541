"""
Command line entry point for the hex to Base64 pipeline.

Decodes one hex string and prints its Base64 form. The input is the single
positional argument, or the HEX_SAMPLE environment value when none is given.

Exit Status:
    0 - Conversion succeeded
    1 - The input is not a valid hex string
    2 - Wrong number of arguments

Environment Variables:
    HEX_SAMPLE: Hex input used without an argument (default: "Hello World")
"""

import os
import sys
from dotenv import find_dotenv, load_dotenv

from hex2b64.errors import DecodeHexError
from hex2b64.utils.b64 import bytes_to_base64
from hex2b64.utils.hexs import hex_to_bytes
from hex2b64.utils.logger import Event, Level, Logger

DEFAULT_HEX_SAMPLE = "48656c6c6f20576f726c64"  # "Hello World"
USAGE = "Correct args usage: hex2b64 [HEX]"


def hex_to_base64(text: str) -> str:
    """
    Decode a hex string and encode the bytes as Base64.

    Raises:
        DecodeHexError: text is not a valid hex string
    """
    return bytes_to_base64(hex_to_bytes(text))


def main(argv=None) -> int:
    """
    Converts one hex string to Base64 and prints the result.

    Args:
        argv: Command line arguments without the program name. With no
            argument the HEX_SAMPLE environment value is converted.

    Returns:
        int: Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    load_dotenv(find_dotenv(usecwd=True))
    hex_input = argv[0] if argv else os.getenv("HEX_SAMPLE", DEFAULT_HEX_SAMPLE)

    logger = Logger("cli")
    logger.configure_logger()
    logger.log_codec_event(Level.LEVEL_INFO, Event.CLI_START, hex_input)

    try:
        data = hex_to_bytes(hex_input)
    except DecodeHexError as e:
        logger.log_codec_event(Level.LEVEL_ERROR, Event.DECODE_FAILED, e.message)
        print(f"Failed to decode hex input: {e.message}", file=sys.stderr)
        return 1
    logger.log_codec_event(Level.LEVEL_INFO, Event.DECODE_OK, f"{len(data)} bytes")

    base64_output = bytes_to_base64(data)
    logger.log_codec_event(Level.LEVEL_INFO, Event.ENCODE_OK, base64_output)

    print(f"Base64 encoded output: {base64_output}")
    logger.log_codec_event(Level.LEVEL_INFO, Event.CLI_DONE)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
