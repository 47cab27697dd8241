"""Lint engine for git commit messages."""

from .commit import CommitMessage, Line, Trailer
from .config import ConfigError, LintConfig, dump_document, lints_from_document, parse_document
from .engine import exit_code_for, lint, lint_async
from .lints import CONFIG_KEY_PREFIX, Lint, Lints, UnknownLintError, UnknownLintsError
from .logging import configure_logging, get_logger
from .models import Annotation, Code, Problem, ProblemBuilder

__version__ = "3.4.0"

__all__ = [
    "Annotation",
    "CONFIG_KEY_PREFIX",
    "Code",
    "CommitMessage",
    "ConfigError",
    "Line",
    "Lint",
    "LintConfig",
    "Lints",
    "Problem",
    "ProblemBuilder",
    "Trailer",
    "UnknownLintError",
    "UnknownLintsError",
    "configure_logging",
    "dump_document",
    "exit_code_for",
    "get_logger",
    "lint",
    "lint_async",
    "lints_from_document",
    "parse_document",
]
