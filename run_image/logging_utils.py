#!/usr/bin/env python3
"""
Shared logging utilities for run-image.

User-facing messages are printed with 'Info:' / 'Error:' prefixes; this
module adds an optional timestamped debug log file for diagnostics.
"""

import sys
import time


def open_debug_log(path):
    """
    Open the debug log file for appending.

    Args:
        path: Path of the debug log, or None if debug logging is disabled.

    Returns:
        An open text file handle, or None when `path` is None.
    """
    if not path:
        return None
    try:
        return open(path, "a", encoding="utf-8")
    except OSError as e:
        print(f"Error: Could not open debug file '{path}': {e}", file=sys.stderr)
        sys.exit(1)


def debug_log(debug_file, message):
    """
    Write a timestamped debug message to the debug file if enabled.

    Args:
        debug_file: An open file handle for writing debug messages,
                    or None if debug logging is disabled.
        message: The debug message string to write.

    Returns:
        None
    """
    if debug_file:
        try:
            timestamp = time.time()
            debug_file.write(f"[{timestamp:.6f}] {message}\n")
            debug_file.flush()
        except (ValueError, OSError):
            # File might already be closed during interpreter shutdown
            pass
