"""
Execution Engine - Single point for the wsl.exe subprocess

ARCHITECTURE:
This is the ONLY place where a subprocess is spawned.

    WslGitExecutor
           ↓
    ExecutionEngine.run(['bash', '-c', 'cd ... && git ...'])  ← THIS CLASS
           ↓
    subprocess.run(['wsl', 'bash', '-c', ...])

EXECUTION MODES:
1. capture_output=False: stdin/stdout/stderr inherited, git talks to the
   caller directly (pagers, prompts and colors keep working)
2. capture_output=True: stdout captured as BYTES for reverse translation,
   stderr still inherited

No timeout and no retries: git runs to completion.

TEST MODE:
When test_mode=True the command is recorded and a fake CompletedProcess
is returned with test_mode_stdout / test_mode_returncode.
"""
import logging
import subprocess
from typing import List, Optional, Sequence

from .constants import WSL_EXECUTABLE
from .exceptions import ExecutionError


class ExecutionEngine:
    """
    Spawns wsl.exe and forwards its exit code.
    """

    def __init__(self, test_mode: bool = False,
                 test_mode_stdout: bytes = b'',
                 test_mode_returncode: int = 0,
                 logger: logging.Logger = None):
        """
        Initialize execution engine.

        Args:
            test_mode: If True, record commands instead of executing
            test_mode_stdout: Stdout returned for captured runs in test mode
            test_mode_returncode: Exit code returned in test mode
            logger: Logger instance for execution tracking
        """
        self.test_mode = test_mode
        self.test_mode_stdout = test_mode_stdout
        self.test_mode_returncode = test_mode_returncode
        self.logger = logger or logging.getLogger('ExecutionEngine')

        # Commands seen in test mode
        self.executed: List[List[str]] = []

    def run(self, wsl_args: Sequence[str], capture_output: bool = False,
            env: Optional[dict] = None) -> subprocess.CompletedProcess:
        """
        Run wsl.exe with the given arguments

        Args:
            wsl_args: Arguments after 'wsl' (e.g. ['bash', '-c', cmd])
            capture_output: Capture stdout as bytes
            env: Environment for the subprocess (default: inherited)

        Returns:
            CompletedProcess (stdout is bytes when captured, else None)

        Raises:
            ExecutionError: wsl.exe could not be spawned
        """
        cmd = [WSL_EXECUTABLE, *wsl_args]
        command_line = wsl_args[-1] if wsl_args else WSL_EXECUTABLE

        if self.test_mode:
            self.logger.info(f"[TEST MODE] Would execute: {cmd}")
            self.executed.append(cmd)
            return subprocess.CompletedProcess(
                args=cmd,
                returncode=self.test_mode_returncode,
                stdout=self.test_mode_stdout if capture_output else None,
                stderr=None
            )

        self.logger.debug(f"Executing: {cmd}")
        try:
            if capture_output:
                return subprocess.run(cmd, stdout=subprocess.PIPE, env=env)
            return subprocess.run(cmd, env=env)
        except OSError as e:
            raise ExecutionError(f"Failed to execute command ({e})", command_line) from e
