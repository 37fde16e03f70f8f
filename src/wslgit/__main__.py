"""
Entry point: wslgit <git arguments>

Behaves like git.exe for Windows tools while git actually runs in WSL.
"""
import logging
import sys
from typing import Optional, Sequence

from .exceptions import ExecutionError, WslGitError
from .wslgit_executor import WslGitExecutor

logger = logging.getLogger('wslgit')


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run git in WSL and forward its output and exit code

    Args:
        argv: Argument vector (default: sys.argv)

    Returns:
        Exit code of git, 1 on translation errors, 127 if wsl.exe cannot run
    """
    argv = list(sys.argv if argv is None else argv)

    try:
        result = WslGitExecutor().execute(argv)
    except ExecutionError as e:
        logger.debug(f"Execution error: {e}", exc_info=True)
        print(f"wslgit: {e}", file=sys.stderr)
        return 127
    except WslGitError as e:
        logger.debug(f"Translation error: {e}", exc_info=True)
        print(f"wslgit: {e}", file=sys.stderr)
        return 1

    if result.stdout is not None:
        sys.stdout.buffer.write(result.stdout)
        sys.stdout.buffer.flush()

    return result.returncode


if __name__ == '__main__':
    sys.exit(main())
