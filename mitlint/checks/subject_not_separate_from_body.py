"""Require a blank line between the subject and the body."""

from __future__ import annotations

from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder
from .base import GIT_COMMIT_GUIDELINES_URL

NAME = "subject-not-separated-from-body"
TITLE = "Your commit message is missing a blank line between the subject and the body"
HELP_MESSAGE = (
    "Most tools that render and parse commit messages, expect commit messages to be in the "
    "form of subject and body. This includes git itself in tools like git-format-patch. If "
    "you don't include this you may see strange behaviour from git and any related tools."
    "\n\nTo fix this separate subject from body with a blank line"
)


def lint(message: CommitMessage) -> List[Problem]:
    if len(message.subject_lines) < 2:
        return []
    gutter = message.subject_lines[1]
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.SUBJECT_NOT_SEPARATE_FROM_BODY, message)
        .with_label_for_span(gutter, 0, None, "Missing blank line")
        .with_url(GIT_COMMIT_GUIDELINES_URL)
        .build()
    ]
