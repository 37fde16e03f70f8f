"""
Argument Classifier - Decide which arguments are paths

HEURISTIC:
An argument (or the value part of a 'key=value' argument) is a path when:
1. It is an absolute Windows path (drive + root, verbatim or UNC), OR
2. The existence check says it exists (relative paths that happen to exist)

Relative paths that do not exist are NOT paths and pass through unchanged.

The check is injectable: swap it for `lambda _: False` to restrict
translation to absolute drive paths only.
"""
import logging
import os
from pathlib import PureWindowsPath
from typing import Callable, Optional, Tuple


class ArgumentClassifier:
    """
    Path detection for single arguments.

    Read-only: the only side effect is the existence check.
    """

    def __init__(self, exists: Optional[Callable[[str], bool]] = None,
                 cwd: Optional[str] = None,
                 logger: logging.Logger = None):
        """
        Initialize classifier

        Args:
            exists: Existence check (default: os.path.exists relative to cwd)
            cwd: Directory relative candidates are checked in (default: process cwd)
            logger: Logger instance
        """
        self.cwd = cwd
        self.exists = exists or self._exists_in_cwd
        self.logger = logger or logging.getLogger('ArgumentClassifier')

    def _exists_in_cwd(self, candidate: str) -> bool:
        if self.cwd is None:
            return os.path.exists(candidate)
        return os.path.exists(os.path.join(self.cwd, candidate))

    @staticmethod
    def split_key_prefix(argument: str) -> Tuple[str, str]:
        """
        Split 'key=value' at the FIRST '='.

        Examples:
            '--file=C:\\a.txt'  → ('--file=', 'C:\\a.txt')
            'a=b=c'            → ('a=', 'b=c')
            'C:\\a.txt'        → ('', 'C:\\a.txt')

        Returns:
            (prefix including '=', value)
        """
        if '=' in argument:
            key, value = argument.split('=', 1)
            return f"{key}=", value
        return '', argument

    def is_path(self, candidate: str) -> bool:
        """
        Check if candidate should be translated as a path

        Args:
            candidate: Argument (value part only)

        Returns:
            True if absolute in the Windows namespace or existing on disk
        """
        if not candidate:
            return False

        if PureWindowsPath(candidate).is_absolute():
            return True

        found = self.exists(candidate)
        if found:
            self.logger.debug(f"Relative path exists, translating: {candidate}")
        return found
