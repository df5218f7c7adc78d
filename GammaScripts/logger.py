"""
Logging utilities for Screen Temperature
"""
import sys
from datetime import datetime

from .config import DEBUG_LOGGING, LOG_HEADER


class Logger:
    """Handles console output and the optional ramp log file"""

    def __init__(self, verbose=False, out=None, err=None):
        self.verbose = verbose or DEBUG_LOGGING
        self.out = out
        self.err = err
        self.log_path = None
        self.log_file = None

    def open_log_file(self, path):
        """Open the ramp log file, appending to an existing one"""
        self.log_path = path
        try:
            self.log_file = open(path, "a", encoding="utf-8")
            if self.log_file.tell() == 0:
                self.log_file.write(LOG_HEADER)
                self.log_file.flush()
        except OSError as e:
            self.log_file = None
            self.warning(f"Could not open log file {path}: {e}")

    def close_log_file(self):
        """Close the ramp log file"""
        if self.log_file:
            try:
                self.log_file.close()
            finally:
                self.log_file = None

    def log(self, message):
        """Console log"""
        print(message, file=self.out or sys.stdout)

    def debug(self, message):
        """Diagnostics, only in verbose mode"""
        if self.verbose:
            print(f"DEBUG: {message}", file=self.err or sys.stderr)

    def warning(self, message):
        print(f"WARNING! {message}", file=self.err or sys.stderr)

    def error(self, message):
        print(f"ERROR! {message}", file=self.err or sys.stderr)

    def log_ramp_data(self, log_entries):
        """
        Log decoded or applied gains to file

        Args:
            log_entries: Iterable of (screen, crtc, size, GainTriple)
        """
        if not self.log_file:
            return
        try:
            ts = datetime.now().isoformat(timespec="milliseconds")
            for screen, crtc, size, gains in log_entries:
                self.log_file.write(
                    f"{ts},{screen},{crtc},{size},{gains.red:.6f},{gains.green:.6f},{gains.blue:.6f}\n"
                )
            self.log_file.flush()
        except OSError as e:
            self.warning(f"Could not write log file {self.log_path}: {e}")
