"""
Structured logging for the hex to Base64 pipeline.

This module implements a small column-formatted event log:
- Structured log format with consistent columns
- One log file for codec events
- Optional console output (controlled via environment)

Log Format:
    | Timestamp          | Level   | Event       | Source       | Data
    Example:
    [-] 2024-01-01T12:00:00Z | INFO    | DECODE_OK   | cli          | 11 bytes

Environment Variables:
    PRINT_CODEC_LOGS: "true"/"false" - Enable console output of logs
    CODEC_LOG_FILE: Path of the log file (default: logs/codec.log)
"""

import logging
from datetime import datetime, timezone
from dotenv import find_dotenv, load_dotenv
import os

DEFAULT_LOG_FILE = os.path.join("logs", "codec.log")
LOGGER_NAME = "hex2b64"
MAX_DATA_LENGTH = 40
HEADER = f"  | {'Timestamp':<20} | {'Level':<7} | {'Event':<12} | {'Source':<12} | {'Data'}\n"
HEADER += '~'*len(HEADER)

class Level:
    """Log level constants for consistent level naming."""
    LEVEL_INFO = 'INFO'
    LEVEL_WARNING = 'WARNING'
    LEVEL_ERROR = 'ERROR'

class Event:
    """
    Event type constants for standardized event logging.

    Pipeline Events:
        CLI_START/DONE - Entry point lifecycle
        DECODE_OK/FAIL - Hex decoding outcome
        ENCODE_OK - Base64 encoding finished
    """
    CLI_START = 'CLI_START'
    CLI_DONE = 'CLI_DONE'
    DECODE_OK = 'DECODE_OK'
    DECODE_FAILED = 'DECODE_FAIL'
    ENCODE_OK = 'ENCODE_OK'


class Logger:
    """
    Structured logger for codec events with consistent formatting.

    Features:
    - Configurable console output
    - Structured log format
    - Level-based formatting
    """

    def __init__(self, source='N/A'):
        """
        Initialize logger with the name of the calling component.

        Args:
            source: Component that emits the events (default: 'N/A')
        """
        self.source = source
        load_dotenv(find_dotenv(usecwd=True))
        self.LOG_TO_CONSOLE = os.getenv("PRINT_CODEC_LOGS", "false").lower() == "true"
        self.log_file = os.getenv("CODEC_LOG_FILE", DEFAULT_LOG_FILE)
        self._logger = logging.getLogger(LOGGER_NAME)

    def configure_logger(self):
        """
        Configure the codec log file handler.

        - Creates the log directory and file if they don't exist
        - Writes the column header to a new or empty log file
        - Prints the header to the console if enabled
        """
        log_dir = os.path.dirname(self.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        if not os.path.exists(self.log_file) or os.path.getsize(self.log_file) == 0:
            with open(self.log_file, 'w') as log_file:
                # Write the header (column titles)
                log_file.write(HEADER + '\n')

        if self.LOG_TO_CONSOLE:
            print(HEADER)

        target = os.path.abspath(self.log_file)
        for handler in list(self._logger.handlers):
            if not isinstance(handler, logging.FileHandler):
                continue
            if handler.baseFilename == target:
                return
            # One log file at a time
            self._logger.removeHandler(handler)
            handler.close()

        file_handler = logging.FileHandler(self.log_file, mode='a')
        file_handler.setFormatter(logging.Formatter('%(message)s'))  # Columns are formatted in log_codec_event
        self._logger.addHandler(file_handler)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

    def format_event(self, level, event, message='N/A'):
        """
        Build a single log line.

        Format:
            [symbol] timestamp | level | event | source | message

        Symbols:
            [-] Info
            [!] Warning
            [x] Error
        """
        # Map log levels to symbols for clarity
        level_symbol = {
            Level.LEVEL_INFO: "[-]",
            Level.LEVEL_WARNING: "[!]",
            Level.LEVEL_ERROR: "[x]"
        }.get(level.upper(), "[-]")  # Default to "[-]" for any unrecognized level

        timestamp = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
        message = str(message).replace('\n', '')
        return f"{level_symbol} {timestamp:<20} | {level:<7} | {event:<12} | {self.source:<12} | {message:.{MAX_DATA_LENGTH}s}"

    def log_codec_event(self, level, event, message='N/A'):
        """
        Log a codec event with consistent formatting.

        Args:
            level: Log level from Level class
            event: Event type from Event class
            message: Additional event information (default: 'N/A')
        """
        log_message = self.format_event(level, event, message)
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
        self._logger.log(log_level, log_message)

        # Optionally print to console
        if self.LOG_TO_CONSOLE:
            print(log_message)
