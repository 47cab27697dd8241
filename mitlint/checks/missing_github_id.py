"""Require a GitHub issue or pull request reference."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "github-id-missing"
TITLE = "Your commit message is missing a GitHub ID"
HELP_MESSAGE = """It's important to add the issue ID because it allows us to link code back to the \
motivations for doing it, and because we can help people exploring the repository link their \
issues to specific bits of code.

You can fix this by adding a ID like the following examples:

#642
GH-642
AnUser/git-mit#642
AnOrganisation/git-mit#642
fixes #642

Be careful just putting '#642' on a line by itself, as '#' is the default comment character"""
HELP_URL = (
    "https://docs.github.com/en/github/writing-on-github/working-with-advanced-formatting/"
    "autolinked-references-and-urls#issues-and-pull-requests"
)

PATTERN = re.compile(
    r"(^| )([a-zA-Z0-9_-]{3,39}/[a-zA-Z0-9-]+#|GH-|#)[0-9]+( |$)",
    re.MULTILINE,
)


@dataclass(frozen=True)
class GitHubIdConfig:
    pattern: Pattern[str] = PATTERN


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, GitHubIdConfig())


def lint_with_config(message: CommitMessage, config: GitHubIdConfig) -> List[Problem]:
    if message.matches_pattern(config.pattern):
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.GITHUB_ID_MISSING, message)
        .with_label_at_last_line("No GitHub ID")
        .with_url(HELP_URL)
        .build()
    ]
