"""
Configuration - Per-invocation settings resolved from the environment

ARCHITECTURE:
wslgit has no config file. Everything is read once from the caller's
environment at startup and frozen into a WslGitConfig value, which is then
handed to every component that needs it.

    os.environ
       ↓
    WslGitConfig.from_environ()  ← ONLY reader of WSLGIT_* variables
       ↓
    ├── ForwardPathTranslator / ReversePathTranslator (mount_root)
    ├── EditorPathPatcher (tool_directory)
    └── InvocationLog (logging_enabled, tool_directory)

The interactive-shell decision is NOT frozen here: it also depends on WSLENV,
which the EnvironmentBridge may extend during translation. It is evaluated by
use_interactive_shell() against the boundary context's final view.
"""
import re
import sys
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Mapping, Optional

from .constants import (
    BASH_ENV,
    DEFAULT_MOUNT_ROOT,
    ENABLE_LOGGING_ENV,
    FALSE_VALUES,
    INTERACTIVE_SHELL_ENV,
    MOUNT_ROOT_ENV,
    TRUE_VALUES,
    WSLENV,
)


def wslenv_token_pattern(name: str) -> re.Pattern:
    """
    Pattern matching NAME as a whole WSLENV token.

    NAME may be first or follow another variable, and may be followed by
    flags, another variable or the end of the list.
    """
    return re.compile(rf'(^|:){re.escape(name)}(/|:|$)')


def normalize_mount_root(value: Optional[str]) -> str:
    """
    Normalize a mount root so it always ends with '/'.

    Args:
        value: Raw setting, or None when unset

    Returns:
        '/mnt/' when unset, otherwise value with a trailing '/'
    """
    if value is None:
        return DEFAULT_MOUNT_ROOT
    if value.endswith('/'):
        return value
    return f"{value}/"


def use_interactive_shell(environ: Mapping[str, str]) -> bool:
    """
    Decide between 'bash -ic' and 'bash -c'.

    RULES (first match wins):
    1. WSLGIT_USE_INTERACTIVE_SHELL set: 'false'/'0' → False, anything else → True
    2. BASH_ENV set AND listed in WSLENV → False
    3. Otherwise → True
    """
    interactive_flag = environ.get(INTERACTIVE_SHELL_ENV)
    if interactive_flag is not None:
        return interactive_flag not in FALSE_VALUES

    if BASH_ENV in environ:
        wslenv = environ.get(WSLENV)
        if wslenv is not None and wslenv_token_pattern(BASH_ENV).search(wslenv):
            return False

    return True


def default_tool_directory() -> Path:
    """Directory of the running wslgit executable (frozen build or console script)"""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent


@dataclass(frozen=True)
class WslGitConfig:
    """Immutable settings for one invocation"""
    mount_root: str = DEFAULT_MOUNT_ROOT
    logging_enabled: bool = False
    tool_directory: PurePath = Path(".")

    @classmethod
    def from_environ(cls, environ: Mapping[str, str],
                     tool_directory: Optional[Path] = None) -> 'WslGitConfig':
        """
        Resolve configuration from an environment mapping

        Args:
            environ: Environment to read (usually os.environ)
            tool_directory: Override for the tool location (tests)

        Returns:
            WslGitConfig
        """
        return cls(
            mount_root=normalize_mount_root(environ.get(MOUNT_ROOT_ENV)),
            logging_enabled=environ.get(ENABLE_LOGGING_ENV) in TRUE_VALUES,
            tool_directory=tool_directory if tool_directory is not None else default_tool_directory(),
        )
