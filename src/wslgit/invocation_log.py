"""
Invocation Log - One line per wslgit call, next to the executable

Enabled with WSLGIT_ENABLE_LOGGING=true|1. Format:

    ['wslgit.exe', 'status'] -> ['bash', '-ic', 'cd "/mnt/c/repo" && git status']

Uses a dedicated logger with its own FileHandler so the line is written
even when nothing else in the process configured logging, and never
reaches stdout/stderr (those belong to git).
"""
import logging
from pathlib import Path
from typing import Sequence

from .constants import INVOCATION_LOGGER_NAME, LOG_FILE_NAME


class InvocationLog:
    """Append-only invocation log"""

    def __init__(self, tool_directory: Path, enabled: bool = False):
        """
        Initialize log

        Args:
            tool_directory: Directory receiving wslgit.log
            enabled: Write nothing when False
        """
        self.enabled = enabled
        self.log_file = Path(tool_directory) / LOG_FILE_NAME
        self.logger = logging.getLogger(INVOCATION_LOGGER_NAME)

    def write(self, input_args: Sequence[str], output_args: Sequence[str]) -> None:
        """
        Append '{input_args!r} -> {output_args!r}'

        Args:
            input_args: Raw argv of this process
            output_args: Arguments passed to wsl.exe
        """
        if not self.enabled:
            return

        handler = logging.FileHandler(self.log_file, mode='a', encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        try:
            self.logger.info(f"{list(input_args)!r} -> {list(output_args)!r}")
        finally:
            self.logger.removeHandler(handler)
            handler.close()
