"""
Errors raised by wslgit

Every error here is fatal for the invocation: nothing is retried and no
partially translated command is ever spawned.
"""


class WslGitError(Exception):
    """Base class for all wslgit errors"""


class PathTranslationError(WslGitError, ValueError):
    """A path cannot be represented in the guest namespace"""

    def __init__(self, message: str, path: str):
        super().__init__(f"{message}: {path!r}")
        self.path = path


class ConfigurationError(WslGitError):
    """Invalid configuration detected at startup (e.g. a pattern that does not compile)"""


class ExecutionError(WslGitError):
    """The guest command could not be spawned or waited for"""

    def __init__(self, message: str, command: str):
        super().__init__(f"{message} '{command}'")
        self.command = command
