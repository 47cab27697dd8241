"""Require subjects in the Conventional Commits style."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, List, NamedTuple, Optional

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "not-conventional-commit"
TITLE = "Your commit message isn't in conventional style"
HELP_MESSAGE = """It's important to follow the conventional commit style when creating your commit \
message. By using this style we can automatically calculate the version of software using \
deployment pipelines, and also generate changelogs and other useful information without human \
interaction.

You can fix it by following style

<type>[optional scope]: <description>

[optional body]

[optional footer(s)]"""
HELP_URL = "https://www.conventionalcommits.org/"

_HEADER_PATTERN = re.compile(
    r"^(?P<type>[A-Za-z0-9]+)(?:\((?P<scope>[^()]*)\))?(?P<breaking>!)?: (?P<description>.*)$"
)


class ConventionalHeader(NamedTuple):
    type: str
    scope: Optional[str]
    breaking: bool
    description: str


@dataclass(frozen=True)
class ConventionalCommitConfig:
    """``None`` allows any type or scope."""

    allowed_types: Optional[FrozenSet[str]] = None
    allowed_scopes: Optional[FrozenSet[str]] = None


def parse_header(subject: str) -> Optional[ConventionalHeader]:
    match = _HEADER_PATTERN.match(subject)
    if match is None:
        return None
    scope = match.group("scope")
    if scope is not None and (not scope or not scope.isalnum()):
        return None
    return ConventionalHeader(
        type=match.group("type"),
        scope=scope,
        breaking=match.group("breaking") is not None,
        description=match.group("description"),
    )


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, ConventionalCommitConfig())


def lint_with_config(message: CommitMessage, config: ConventionalCommitConfig) -> List[Problem]:
    if not _has_problem(message, config):
        return []
    builder = ProblemBuilder(TITLE, HELP_MESSAGE, Code.NOT_CONVENTIONAL_COMMIT, message)
    if message.subject_lines:
        builder.with_label_for_span(message.subject_lines[0], 0, None, "Not conventional")
    else:
        builder.with_label("Not conventional", 0, 0)
    return [builder.with_url(HELP_URL).build()]


def _has_problem(message: CommitMessage, config: ConventionalCommitConfig) -> bool:
    first_line = message.subject_lines[0].text if message.subject_lines else ""
    header = parse_header(first_line)
    if header is None:
        return True
    if config.allowed_types is not None and header.type not in config.allowed_types:
        return True
    if (
        config.allowed_scopes is not None
        and header.scope is not None
        and header.scope not in config.allowed_scopes
    ):
        return True
    return False
