"""Reject subjects that are tool defaults or filler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder
from .base import GIT_COMMIT_GUIDELINES_URL

NAME = "placeholder-message"
TITLE = "Your commit message is a placeholder"
HELP_MESSAGE = (
    "Messages like \"fix\" or \"Add files via upload\" are what tools and editors fill in "
    "when nobody writes a message. They tell future readers nothing about why the change "
    "was made.\n\n"
    "You can fix this by describing what the commit changes and why"
)

# Compared case-insensitively against the whole, trimmed subject.
PLACEHOLDERS = frozenset(
    {
        ".",
        "...",
        "-",
        "add files via upload",
        "asdf",
        "change",
        "changes",
        "commit",
        "commit message",
        "edit",
        "fix",
        "fixes",
        "minor changes",
        "minor fixes",
        "misc",
        "no message",
        "stuff",
        "temp",
        "test",
        "tmp",
        "update",
        "update readme.md",
        "updates",
    }
)


@dataclass(frozen=True)
class PlaceholderMessageConfig:
    placeholders: FrozenSet[str] = PLACEHOLDERS


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, PlaceholderMessageConfig())


def lint_with_config(message: CommitMessage, config: PlaceholderMessageConfig) -> List[Problem]:
    if not message.subject_lines:
        return []
    subject = message.subject.strip().casefold()
    if subject not in config.placeholders:
        return []
    first_line = message.subject_lines[0]
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.PLACEHOLDER_MESSAGE, message)
        .with_label_for_span(first_line, 0, len(first_line.text.rstrip()), "Placeholder message")
        .with_url(GIT_COMMIT_GUIDELINES_URL)
        .build()
    ]
