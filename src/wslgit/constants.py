"""
Constants and configuration for the wslgit shim
"""

# ============================================================================
# ENVIRONMENT VARIABLES - Configuration
# ============================================================================
# All configuration comes from the Windows-side environment of the caller.
# WslGitConfig.from_environ() is the only reader of these names.

MOUNT_ROOT_ENV = 'WSLGIT_MOUNT_ROOT'              # Unix dir holding the drives
INTERACTIVE_SHELL_ENV = 'WSLGIT_USE_INTERACTIVE_SHELL'
ENABLE_LOGGING_ENV = 'WSLGIT_ENABLE_LOGGING'

# Boundary variable-list read by WSL to import Windows variables.
# Format: NAME/flags:OTHER/flags (flags are optional)
WSLENV = 'WSLENV'

# Shell startup file. When it is forwarded through WSLENV the caller wants
# a non-interactive shell that still sources their setup.
BASH_ENV = 'BASH_ENV'

DEFAULT_MOUNT_ROOT = '/mnt/'

# Values accepted for boolean switches
FALSE_VALUES = ('false', '0')
TRUE_VALUES = ('true', '1')

# Flag appended to names added to WSLENV (p = translate as path list)
WSLENV_DEFAULT_FLAG = 'p'


# ============================================================================
# SUBPROCESS
# ============================================================================

WSL_EXECUTABLE = 'wsl'
GUEST_SHELL = 'bash'
GUEST_COMMAND = 'git'

# Git subcommands whose stdout contains guest paths worth rewriting back
# to drive notation. Everything else is passed through untouched.
TRANSLATED_OUTPUT_COMMANDS = (
    'rev-parse',   # --show-toplevel, --git-dir
    'remote',      # -v lists local mirrors by path
)


# ============================================================================
# ARGUMENT FORMATTING
# ============================================================================

# Caller already quoted the argument
QUOTE_CHARACTERS = frozenset('"\'')

# Characters bash would split on or interpret
UNSAFE_CHARACTERS = frozenset(' ()|')

# Portable embedded newline for a bash -c command line
ESCAPED_NEWLINE = "$'\n'"


# ============================================================================
# FILES NEXT TO THE TOOL
# ============================================================================

LOG_FILE_NAME = 'wslgit.log'
INVOCATION_LOGGER_NAME = 'wslgit.invocation'
