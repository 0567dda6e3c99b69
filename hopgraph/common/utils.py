"""
Logging helpers shared by the graph core, the edge list loader and the CLI
"""

import sys
import traceback


class Logger:
    """
    Console logger that suppresses repeated debug and info messages

    Components accept an optional instance and guard every call with `if self.logger:`
    """

    def __init__(self, verbose=False):
        """
        Args:
            verbose (bool): Enable debug output
        """
        self.verbose = verbose
        self.seen_messages = set()
        self.log_level = 1 if not verbose else 0  # 0=debug, 1=info, 2=warning, 3=error

    def debug(self, message):
        """
        Log a debug message (only in verbose mode)

        Args:
            message (str): Debug message to log
        """
        if self.log_level <= 0:
            msg_hash = hash(message)
            if msg_hash not in self.seen_messages:
                print(f"... Debug: {message}", file=sys.stderr)
                self.seen_messages.add(msg_hash)

    def info(self, message):
        """
        Log an informational message, avoiding duplicates

        Args:
            message (str): Message to log
        """
        if self.log_level <= 1:
            msg_hash = hash(message)
            if msg_hash not in self.seen_messages:
                print(message, file=sys.stderr)
                self.seen_messages.add(msg_hash)

    def warning(self, message):
        """
        Log a warning message, always shown

        Args:
            message (str): Warning message to log
        """
        if self.log_level <= 2:
            print(f"Warning: {message}", file=sys.stderr)

    def error(self, message, exception=None):
        """
        Log an error message with optional exception details

        Args:
            message (str): Error message to log
            exception (Exception): Optional exception whose traceback is printed in verbose mode
        """
        if self.log_level <= 3:
            print(f"Error: {message}", file=sys.stderr)
            if exception and self.verbose:
                traceback.print_exception(type(exception), exception, exception.__traceback__)

