"""
Environment Bridge - Pass Windows values into WSL through WSLENV

WSL only imports the Windows variables listed in WSLENV:

    WSLENV=BASH_ENV/up:FORK_RI_EXE_PATH/p
           ^^^^^^^^ ^^ ^^^^^^^^^^^^^^^^ ^
           name     flags               flag p = translate as path

Architecture:
    - BoundaryContext: snapshot of the process environment + pending changes
    - Threaded through the translation pipeline (rewrite rules call propagate())
    - Committed to the real environment ONCE, right before the spawn

Nothing touches os.environ until commit(), so propagation can be tested
without process-global side effects.

Example:
    >>> context = BoundaryContext({'WSLENV': 'TMP/p'})
    >>> context.propagate('FORK_RI_EXE_PATH', 'C:/Fork/Fork.RI.exe')
    >>> context.get('WSLENV')
    'TMP/p:FORK_RI_EXE_PATH/p'
    >>> context.propagate('FORK_RI_EXE_PATH', 'ignored')
    >>> context.get('FORK_RI_EXE_PATH')
    'C:/Fork/Fork.RI.exe'
"""
import logging
import os
from typing import Dict, MutableMapping, Mapping, Optional

from .config import wslenv_token_pattern
from .constants import WSLENV, WSLENV_DEFAULT_FLAG


class BoundaryContext:
    """
    Environment as seen by the guest side.

    Reads fall through pending changes to the snapshot taken at creation.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 logger: logging.Logger = None):
        """
        Initialize context

        Args:
            environ: Environment snapshot (default: copy of os.environ)
            logger: Logger instance
        """
        self._base: Dict[str, str] = dict(os.environ if environ is None else environ)
        self._pending: Dict[str, str] = {}
        self.logger = logger or logging.getLogger('BoundaryContext')

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a variable value (pending change first)

        Args:
            name: Variable name
            default: Default value if not found

        Returns:
            Variable value or default
        """
        if name in self._pending:
            return self._pending[name]
        return self._base.get(name, default)

    def has(self, name: str) -> bool:
        """Check if variable is set"""
        return name in self._pending or name in self._base

    def set(self, name: str, value: str) -> None:
        """Record a pending change"""
        self._pending[name] = value

    def is_listed(self, name: str) -> bool:
        """
        Check if name is a whole token of WSLENV

        'BASH_ENV' is listed in 'TMP:BASH_ENV/up' but not in 'NOT_BASH_ENV/up'.
        """
        wslenv = self.get(WSLENV)
        if wslenv is None:
            return False
        return wslenv_token_pattern(name).search(wslenv) is not None

    def propagate(self, name: str, value: str) -> None:
        """
        Pass a value to WSL using an environment variable and WSLENV.

        - The variable is only set if not already present (first writer wins)
        - The name is added to WSLENV only once

        Args:
            name: Name to use for the environment variable
            value: The value to pass to WSL
        """
        if not self.has(name):
            self.set(name, value)

        wslenv = self.get(WSLENV)
        if wslenv is None:
            self.set(WSLENV, f"{name}/{WSLENV_DEFAULT_FLAG}")
        elif not self.is_listed(name):
            self.set(WSLENV, f"{wslenv}:{name}/{WSLENV_DEFAULT_FLAG}")
        else:
            return

        self.logger.debug(f"Propagating {name} via WSLENV={self.get(WSLENV)}")

    @property
    def pending(self) -> Dict[str, str]:
        """Changes not yet committed"""
        return self._pending.copy()

    @property
    def environ(self) -> Dict[str, str]:
        """Merged environment (snapshot + pending changes)"""
        merged = self._base.copy()
        merged.update(self._pending)
        return merged

    def commit(self, target: Optional[MutableMapping[str, str]] = None) -> None:
        """
        Write pending changes into the real environment.

        Must run before the subprocess is spawned.

        Args:
            target: Mapping to update (default: os.environ)
        """
        if target is None:
            target = os.environ
        for name, value in self._pending.items():
            target[name] = value
        self._base.update(self._pending)
        self._pending.clear()

    def __repr__(self) -> str:
        return f"BoundaryContext(pending={self._pending})"
