"""
Translation Pipeline - Per-argument and per-output transforms

DATA FLOW (one argument):
    raw argument
        ↓
    EditorPathPatcher.patch()            ← rewrite rules (may propagate env)
        ↓
    ForwardPathTranslator.translate_argument()
        ↓
    ArgumentFormatter.format_argument()  ← whole argument, key prefix included
        ↓
    ArgumentFormatter.escape_newline()
        ↓
    joined into: cd "/mnt/c/repo" && git <args...>

DATA FLOW (output):
    stdout bytes → ReversePathTranslator.to_windows() (allow-listed subcommands only)
"""
import logging
from typing import List, Optional, Sequence

from .argument_classifier import ArgumentClassifier
from .argument_formatter import ArgumentFormatter
from .config import WslGitConfig
from .constants import GUEST_COMMAND, GUEST_SHELL, TRANSLATED_OUTPUT_COMMANDS
from .environment_bridge import BoundaryContext
from .path_translator import ForwardPathTranslator, ReversePathTranslator
from .rewrite_rules import EditorPathPatcher, RewriteRule


class TranslationPipeline:
    """
    Composes the translators for one invocation.

    Holds no state of its own besides the components; environment changes
    go to the BoundaryContext passed in.
    """

    def __init__(self, config: WslGitConfig, context: BoundaryContext,
                 classifier: Optional[ArgumentClassifier] = None,
                 rules: Optional[Sequence[RewriteRule]] = None,
                 logger: logging.Logger = None):
        """
        Initialize pipeline

        Args:
            config: Invocation configuration
            context: Boundary context for environment propagation
            classifier: Path detection (default: ArgumentClassifier())
            rules: Pre-pass rewrite rules (default: DEFAULT_REWRITE_RULES)
            logger: Logger instance
        """
        self.config = config
        self.context = context
        self.logger = logger or logging.getLogger('TranslationPipeline')

        self.patcher = EditorPathPatcher(config.tool_directory, context, rules=rules)
        self.forward = ForwardPathTranslator(config.mount_root, classifier=classifier)
        self.reverse = ReversePathTranslator(config.mount_root)
        self.formatter = ArgumentFormatter()

    def translate_argument(self, argument: str) -> str:
        """
        Full per-argument transform

        Args:
            argument: Raw argument from the caller

        Returns:
            Argument ready for the bash command line
        """
        patched = self.patcher.patch(argument)
        translated = self.forward.translate_argument(patched)
        return self.formatter.format(translated)

    def build_git_command(self, cwd: str, arguments: Sequence[str]) -> str:
        """
        Build the command string executed by bash inside WSL

        Args:
            cwd: Windows working directory of the caller
            arguments: Git arguments (without program name)

        Returns:
            'cd "<cwd>" && git <translated args>'
        """
        git_args: List[str] = [
            'cd',
            f'"{self.forward.to_unix(cwd)}"',
            '&&',
            GUEST_COMMAND,
        ]
        git_args.extend(self.translate_argument(arg) for arg in arguments)
        return ' '.join(git_args)

    def build_wsl_arguments(self, git_command: str, interactive: bool) -> List[str]:
        """
        Arguments passed to wsl.exe

        Args:
            git_command: Command string from build_git_command()
            interactive: Use 'bash -ic' (sources ~/.bashrc) instead of 'bash -c'

        Returns:
            ['bash', '-ic' | '-c', git_command]
        """
        return [GUEST_SHELL, '-ic' if interactive else '-c', git_command]

    @staticmethod
    def should_translate_output(arguments: Sequence[str]) -> bool:
        """True if any argument is a subcommand whose output lists paths"""
        return any(arg in TRANSLATED_OUTPUT_COMMANDS for arg in arguments)

    def translate_output(self, output: bytes) -> bytes:
        """Rewrite mounted drives in captured stdout back to drive notation"""
        return self.reverse.to_windows(output)
