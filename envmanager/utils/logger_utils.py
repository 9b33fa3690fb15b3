#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import sys
from datetime import datetime
from typing import Optional

from colorama import init as ColoramaInit, Fore, Style

from envmanager.envmanager_constants import OperationResult

ColoramaInit()


class EnvManagerLogger:
    """A static logger for environment manager operations with color-coded console output."""

    _console_output_enabled = True
    _main_log_file: Optional[str] = None
    _debug_enabled = False

    def __init__(self):
        """Constructor disabled - use static methods only."""
        raise NotImplementedError(
            "EnvManagerLogger is entirely static. Use static methods directly."
        )

    @classmethod
    def set_console_output(cls, enabled: bool):
        cls._console_output_enabled = enabled

    @classmethod
    def set_log_file(cls, main_log_file: Optional[str]):
        """Set the main log file for all logging operations."""
        cls._main_log_file = main_log_file

    @classmethod
    def set_debug_enabled(cls, enabled: bool):
        """Enable or disable debug-level logging."""
        cls._debug_enabled = enabled

    @classmethod
    def is_debug_enabled(cls) -> bool:
        return cls._debug_enabled

    @classmethod
    def generate_timestamped_filename(cls, base_name: str = "envmanager") -> str:
        """Generate a timestamped filename for logging."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{base_name}_{timestamp}.log"

    @staticmethod
    def _log(label: str, color: str, message: str, file: Optional[object] = None):
        """Log a message to the log file if one is set, otherwise to the console."""
        file = file or sys.stdout
        timestamp = f"[{EnvManagerLogger._timestamp()}]"

        if EnvManagerLogger._main_log_file:
            try:
                with open(EnvManagerLogger._main_log_file, "a", encoding="utf-8") as f:
                    f.write(f"{timestamp} ({label}) {message}\n")
                return
            except OSError as e:
                print(
                    f"{timestamp} (ERROR) unable to write log file {EnvManagerLogger._main_log_file}: {e}",
                    file=sys.stderr,
                )
                file = sys.stderr

        if EnvManagerLogger._console_output_enabled:
            print(f"{timestamp} {color}({label}){Style.RESET_ALL} {message}", file=file)

    @staticmethod
    def start(label: str):
        """Log the start of a given operation."""
        EnvManagerLogger._log("START", Fore.BLUE, f"[{label}]")

    @staticmethod
    def end(
        label: str,
        status: OperationResult,
        message: Optional[str] = None,
    ):
        """Log the end of a given operation."""
        log_message = f"[{label}]"
        if message:
            log_message += f": {message}"

        if status == OperationResult.SUCCESS:
            EnvManagerLogger._log("SUCCESS", Fore.GREEN, log_message)
        elif status == OperationResult.SKIPPED:
            EnvManagerLogger._log("SKIP", Fore.MAGENTA, log_message)
        else:  # FAILURE
            EnvManagerLogger._log("FAIL", Fore.RED, log_message, file=sys.stderr)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    @staticmethod
    def info(message: str):
        """Log a simple info message."""
        EnvManagerLogger._log("info", "", message)

    @staticmethod
    def warning(message: str):
        """Log a simple warning message."""
        EnvManagerLogger._log("WARNING", Fore.YELLOW, message, file=sys.stderr)

    @staticmethod
    def error(message: str):
        """Log a simple error message."""
        EnvManagerLogger._log("ERROR", Fore.RED, message, file=sys.stderr)

    @staticmethod
    def debug(message: str):
        """Log a debug message - only shown when debug is enabled."""
        if EnvManagerLogger._debug_enabled:
            EnvManagerLogger._log("DEBUG", Fore.CYAN, message)
