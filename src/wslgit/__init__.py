"""
wslgit - Use the git of a WSL distribution from Windows

Main components:
- WslGitExecutor: Main orchestrator
- TranslationPipeline: Per-argument and per-output transforms
- ForwardPathTranslator: C:\\repo → /mnt/c/repo
- ReversePathTranslator: /mnt/c/repo → c:/repo in captured output
- ArgumentClassifier: Which arguments are paths
- ArgumentFormatter: Quoting for bash -c
- BoundaryContext: WSLENV propagation
- EditorPathPatcher: Rewrite rules for tools that cannot run in WSL
- ExecutionEngine: wsl.exe subprocess
"""

from .wslgit_executor import WslGitExecutor
from .translation_pipeline import TranslationPipeline
from .path_translator import ForwardPathTranslator, ReversePathTranslator
from .argument_classifier import ArgumentClassifier
from .argument_formatter import ArgumentFormatter
from .environment_bridge import BoundaryContext
from .rewrite_rules import EditorPathPatcher, RewriteRule, DEFAULT_REWRITE_RULES
from .execution_engine import ExecutionEngine
from .config import WslGitConfig
from .exceptions import WslGitError, PathTranslationError, ConfigurationError, ExecutionError

__all__ = [
    'WslGitExecutor',
    'TranslationPipeline',
    'ForwardPathTranslator',
    'ReversePathTranslator',
    'ArgumentClassifier',
    'ArgumentFormatter',
    'BoundaryContext',
    'EditorPathPatcher',
    'RewriteRule',
    'DEFAULT_REWRITE_RULES',
    'ExecutionEngine',
    'WslGitConfig',
    'WslGitError',
    'PathTranslationError',
    'ConfigurationError',
    'ExecutionError',
]
