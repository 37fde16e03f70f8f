"""
Argument Formatter - Quoting for the 'bash -c' command line

All arguments are joined into ONE string executed by bash inside WSL, so
every argument is re-interpreted by the shell. The formatter decides which
arguments need to be protected.

RULES (in order):
1. Contains '"' or "'"           → caller quoted it, unchanged
2. Empty or contains ' ( ) |     → wrapped in double quotes
3. Otherwise                     → unchanged

Newlines are escaped afterwards as $'<newline>' so multi-line values
(commit messages) survive the join.
"""
from .constants import ESCAPED_NEWLINE, QUOTE_CHARACTERS, UNSAFE_CHARACTERS


class ArgumentFormatter:
    """Stateless quoting and newline escaping"""

    @staticmethod
    def format_argument(argument: str) -> str:
        """
        Quote an argument if bash would split or interpret it

        Args:
            argument: Translated argument (key prefix included)

        Returns:
            Argument ready to be joined into the command line
        """
        if any(ch in QUOTE_CHARACTERS for ch in argument):
            return argument
        if not argument or any(ch in UNSAFE_CHARACTERS for ch in argument):
            return f'"{argument}"'
        return argument

    @staticmethod
    def escape_newline(argument: str) -> str:
        """Replace every newline with $'<newline>'"""
        return argument.replace('\n', ESCAPED_NEWLINE)

    def format(self, argument: str) -> str:
        """format_argument() then escape_newline()"""
        return self.escape_newline(self.format_argument(argument))
