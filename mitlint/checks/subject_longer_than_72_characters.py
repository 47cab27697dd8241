"""Keep the subject line short enough for ``git log --oneline``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder
from .base import GIT_COMMIT_GUIDELINES_URL

NAME = "subject-longer-than-72-characters"
TITLE = "Your subject is longer than 72 characters"
HELP_MESSAGE = (
    "It's important to keep the subject of the commit less than 72 characters because when "
    "you look at the git log, that's where it truncates the message. This means that people "
    "won't get the entirety of the information in your commit.\n\n"
    "Please keep the subject line 72 characters or under"
)
CHARACTER_LIMIT = 72


@dataclass(frozen=True)
class SubjectLengthConfig:
    character_limit: int = CHARACTER_LIMIT


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, SubjectLengthConfig())


def lint_with_config(message: CommitMessage, config: SubjectLengthConfig) -> List[Problem]:
    if not message.subject_lines:
        return []
    first_line = message.subject_lines[0]
    if len(first_line.text) <= config.character_limit:
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.SUBJECT_LONGER_THAN_72_CHARACTERS, message)
        .with_label_for_line(first_line, config.character_limit, "Too long")
        .with_url(GIT_COMMIT_GUIDELINES_URL)
        .build()
    ]
