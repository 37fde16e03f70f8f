"""
Rewrite Rules - Pre-pass fixes for third-party tools that cannot run in WSL

Some Git GUIs configure git with a Windows executable that git (running
inside WSL) must call back, e.g. Fork's merge helper:

    -c merge.editor=C:/Users/me/AppData/Local/Fork/app-1.0/Fork.RI.exe

The executable cannot run from inside the guest namespace, so each rule:
1. Smuggles the real path across the boundary (BoundaryContext.propagate)
2. Points the argument at a cooperating script shipped next to wslgit

The rewritten argument then continues through normal forward translation.

Adding a tool = adding a RewriteRule to DEFAULT_REWRITE_RULES.
"""
import logging
import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Optional, Sequence

from .environment_bridge import BoundaryContext
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class RewriteRule:
    """
    One pre-pass rewrite.

    pattern must define the named groups 'prefix' (kept verbatim) and
    'target' (the executable path to smuggle and replace).
    """
    name: str
    pattern: str
    propagate_as: str
    replacement_file: str


DEFAULT_REWRITE_RULES: List[RewriteRule] = [
    RewriteRule(
        name='fork-merge-helper',
        pattern=r'(?P<prefix>\.editor=)(?P<target>.*Fork\.RI\.exe)',
        propagate_as='FORK_RI_EXE_PATH',
        replacement_file='Fork.RI',
    ),
]


class EditorPathPatcher:
    """
    Applies the rewrite rules, in order, to a raw argument.
    """

    def __init__(self, tool_directory: PurePath, context: BoundaryContext,
                 rules: Optional[Sequence[RewriteRule]] = None,
                 logger: logging.Logger = None):
        """
        Initialize patcher (compiles every rule)

        Args:
            tool_directory: Directory holding the helper scripts
            context: Boundary context receiving the smuggled paths
            rules: Ordered rules (default: DEFAULT_REWRITE_RULES)
            logger: Logger instance

        Raises:
            ConfigurationError: a rule pattern does not compile
        """
        self.tool_directory = tool_directory
        self.context = context
        self.rules = list(DEFAULT_REWRITE_RULES if rules is None else rules)
        self.logger = logger or logging.getLogger('EditorPathPatcher')

        self._compiled = []
        for rule in self.rules:
            try:
                self._compiled.append((rule, re.compile(rule.pattern)))
            except re.error as e:
                raise ConfigurationError(f"Failed to compile rewrite rule '{rule.name}': {e}") from e

    def patch(self, argument: str) -> str:
        """
        Apply all matching rules to an argument

        Args:
            argument: Raw argument from the caller

        Returns:
            Argument with tool executables replaced by helper scripts
        """
        for rule, pattern in self._compiled:
            match = pattern.search(argument)
            if not match:
                continue

            self.context.propagate(rule.propagate_as, match.group('target'))

            helper_path = str(self.tool_directory / rule.replacement_file)
            argument = pattern.sub(lambda m: f"{m.group('prefix')}{helper_path}", argument)
            self.logger.debug(f"Rule '{rule.name}' rewrote argument → {argument!r}")

        return argument
