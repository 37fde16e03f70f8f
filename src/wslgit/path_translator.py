"""
Path Translator - Windows drive paths ↔ WSL mount-root paths

ARCHITECTURE:
Git runs inside WSL, the caller lives on Windows. Windows drives are exposed
inside the guest as subdirectories of the mount root:

    C:\\Users\\me\\repo      ↔  /mnt/c/Users/me/repo
    D:\\                    ↔  /mnt/d

FORWARD (arguments, before execution):
    ForwardPathTranslator.translate_argument('--file=C:\\a\\b.txt')
        → split 'key=' prefix (ArgumentClassifier)
        → value is a path? → to_unix(value)
        → '--file=/mnt/c/a/b.txt'

REVERSE (captured stdout, after execution):
    ReversePathTranslator.to_windows(b'origin  /mnt/c/repo/ (fetch)')
        → b'origin  c:/repo/ (fetch)'

Parsing uses PureWindowsPath so the result does not depend on the host
platform (the test suite runs on Linux).

Reverse translation works on BYTES: git output may contain file names
that are not valid in any fixed text encoding.
"""
import logging
import re
from pathlib import PureWindowsPath
from typing import Optional

from .argument_classifier import ArgumentClassifier
from .config import normalize_mount_root
from .exceptions import ConfigurationError, PathTranslationError

# Plain 'C:' or verbatim '\\?\C:' drive component
DRIVE_PATTERN = re.compile(r'^(?:\\\\\?\\)?(?P<letter>[A-Za-z]):$')


class ForwardPathTranslator:
    """
    Windows → WSL translation for arguments and the working directory.
    """

    def __init__(self, mount_root: str, classifier: Optional[ArgumentClassifier] = None,
                 logger: logging.Logger = None):
        """
        Initialize forward translator

        Args:
            mount_root: Unix directory holding the drives (normalized to end with '/')
            classifier: Path detection (default: ArgumentClassifier())
            logger: Logger instance
        """
        self.mount_root = normalize_mount_root(mount_root)
        self.classifier = classifier or ArgumentClassifier()
        self.logger = logger or logging.getLogger('ForwardPathTranslator')

    def get_prefix_for_drive(self, drive_letter: str) -> str:
        """'/mnt/' + 'c' → '/mnt/c'"""
        return f"{self.mount_root}{drive_letter}"

    def _drive_letter(self, drive: str, path: str) -> str:
        match = DRIVE_PATTERN.match(drive)
        if not match:
            raise PathTranslationError("Cannot handle path", path)
        return match.group('letter').lower()

    def to_unix(self, path: str) -> str:
        """
        Translate a Windows path → WSL path.

        RULES:
        - Drive component consumed, replaced by {mount_root}{letter}
        - Root separator consumed
        - Every other component appended with a single '/'
        - No trailing separator ('C:\\' → '/mnt/c')

        Args:
            path: Windows path (absolute or relative)

        Returns:
            Unix-style path

        Raises:
            PathTranslationError: UNC/device drive, or a component that
                cannot be represented as text
        """
        win_path = PureWindowsPath(path)
        parts = list(win_path.parts)

        unix_path = ''
        if win_path.drive:
            unix_path = self.get_prefix_for_drive(self._drive_letter(win_path.drive, path))
        if win_path.anchor:
            parts = parts[1:]
        elif path == '.' or path[:2] in ('./', '.\\'):
            # PureWindowsPath drops a leading '.', keep it visible for git
            parts.insert(0, '.')

        for part in parts:
            try:
                part.encode('utf-8')
            except UnicodeEncodeError as e:
                raise PathTranslationError("Cannot represent path", path) from e
            if unix_path and not unix_path.endswith('/'):
                unix_path += '/'
            unix_path += part

        return unix_path

    def translate_argument(self, argument: str) -> str:
        """
        Translate the path part of a single argument

        Args:
            argument: Raw argument, optionally 'key=value'

        Returns:
            '{prefix}{translated value}' when the value is a path,
            otherwise the argument unchanged
        """
        prefix, value = self.classifier.split_key_prefix(argument)
        if not self.classifier.is_path(value):
            return argument

        translated = f"{prefix}{self.to_unix(value)}"
        self.logger.debug(f"Translated argument: {argument!r} → {translated!r}")
        return translated


class ReversePathTranslator:
    """
    WSL → Windows translation for captured output.

    A mounted drive ('/mnt/x') becomes 'x:/' when it:
    - starts a line or follows a whitespace, AND
    - ends the line, is followed by '/', or is followed by a whitespace

    Surrounding whitespace is re-emitted unchanged.
    """

    def __init__(self, mount_root: str, logger: logging.Logger = None):
        """
        Initialize reverse translator (compiles the pattern once)

        Args:
            mount_root: Unix directory holding the drives
            logger: Logger instance

        Raises:
            ConfigurationError: pattern does not compile
        """
        self.mount_root = normalize_mount_root(mount_root)
        self.logger = logger or logging.getLogger('ReversePathTranslator')

        root = re.escape(self.mount_root.encode('utf-8', 'surrogateescape'))
        try:
            self.pattern = re.compile(
                rb'(?m)(^|(?P<pre>\s))' + root + rb'(?P<drive>[A-Za-z])($|/|(?P<post>\s))'
            )
        except re.error as e:
            raise ConfigurationError(f"Failed to compile mount root pattern: {e}") from e

    def to_windows(self, output: bytes) -> bytes:
        """
        Rewrite every mounted drive in a whole output buffer

        Args:
            output: Raw subprocess stdout

        Returns:
            Rewritten buffer (line separators preserved)
        """
        return self.pattern.sub(rb'\g<pre>\g<drive>:/\g<post>', output)
