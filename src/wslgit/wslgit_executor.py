"""
WslGit Executor - Main orchestrator (thin layer)

ARCHITECTURE:
This is the TOP-LEVEL ENTRY POINT for one wslgit invocation. It delegates
all decisions to specialized components.

Position in hierarchy:
    wslgit.exe <git args>
       ↓
    WslGitExecutor (this class) ← ORCHESTRATOR
       ↓
    ├── WslGitConfig ← environment settings
    ├── BoundaryContext ← WSLENV propagation (committed before spawn)
    ├── TranslationPipeline ← arguments in, output back
    ├── InvocationLog ← optional wslgit.log line
    └── ExecutionEngine ← wsl.exe subprocess

DATA FLOW:
    execute(argv) →
        1. WslGitConfig.from_environ()
        2. TranslationPipeline.build_git_command(cwd, argv[1:])
        3. use_interactive_shell(context.environ) → 'bash -ic' | 'bash -c'
        4. InvocationLog.write(argv, wsl_args)
        5. BoundaryContext.commit()   ← ALL propagation done before spawn
        6. ExecutionEngine.run(wsl_args, capture_output=<allow-listed?>)
        7. TranslationPipeline.translate_output(stdout) if captured

USAGE PATTERN:
    executor = WslGitExecutor()
    result = executor.execute(sys.argv)
    sys.exit(result.returncode)
"""
import logging
import os
import subprocess
from pathlib import PurePath
from typing import MutableMapping, Optional, Sequence

from .argument_classifier import ArgumentClassifier
from .config import WslGitConfig, use_interactive_shell
from .environment_bridge import BoundaryContext
from .execution_engine import ExecutionEngine
from .invocation_log import InvocationLog
from .translation_pipeline import TranslationPipeline


class WslGitExecutor:
    """
    Runs git inside WSL on behalf of a Windows caller.

    RESPONSIBILITIES:
    - Wire the components for one invocation
    - Enforce ordering (environment committed before spawn)
    - Forward output and exit code
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None,
                 cwd: Optional[str] = None,
                 tool_directory: Optional[PurePath] = None,
                 engine: Optional[ExecutionEngine] = None,
                 classifier: Optional[ArgumentClassifier] = None,
                 logger: logging.Logger = None):
        """
        Initialize executor

        Args:
            environ: Environment to read and commit to (default: os.environ)
            cwd: Caller working directory (default: os.getcwd())
            tool_directory: Location of wslgit (default: running executable dir)
            engine: Execution engine (default: real subprocess)
            classifier: Path detection (default: ArgumentClassifier checking cwd)
            logger: Logger instance
        """
        self.environ = os.environ if environ is None else environ
        self.cwd = cwd
        self.tool_directory = tool_directory
        self.engine = engine or ExecutionEngine()
        self.classifier = classifier
        self.logger = logger or logging.getLogger('WslGitExecutor')

    def execute(self, argv: Sequence[str]) -> subprocess.CompletedProcess:
        """
        Run one invocation

        Args:
            argv: Full argument vector (argv[0] is the program name)

        Returns:
            CompletedProcess from wsl.exe; stdout is the reverse-translated
            bytes for allow-listed subcommands, None otherwise

        Raises:
            WslGitError: path translation or spawn failure
        """
        config = WslGitConfig.from_environ(self.environ, tool_directory=self.tool_directory)
        context = BoundaryContext(self.environ)

        git_args = list(argv[1:])
        cwd = self.cwd if self.cwd is not None else os.getcwd()

        # Relative arguments are checked in the directory git will run in
        classifier = self.classifier or ArgumentClassifier(cwd=cwd)
        pipeline = TranslationPipeline(config, context, classifier=classifier)

        git_command = pipeline.build_git_command(cwd, git_args)
        interactive = use_interactive_shell(context.environ)
        wsl_args = pipeline.build_wsl_arguments(git_command, interactive)
        self.logger.debug(f"Git command: {git_command} (interactive={interactive})")

        InvocationLog(config.tool_directory, enabled=config.logging_enabled).write(argv, wsl_args)

        context.commit(self.environ)

        capture_output = pipeline.should_translate_output(git_args)
        result = self.engine.run(wsl_args, capture_output=capture_output, env=dict(self.environ))

        if capture_output and result.stdout is not None:
            result.stdout = pipeline.translate_output(result.stdout)

        return result
