"""The subject is a title and starts with a capital letter."""

from __future__ import annotations

from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder
from .base import GIT_COMMIT_GUIDELINES_URL

NAME = "subject-line-not-capitalized"
TITLE = "Your commit message is missing a capital letter"
HELP_MESSAGE = (
    "The subject line is a title, and as such should be capitalised.\n\n"
    "You can fix this by capitalising the first character in the subject"
)


def lint(message: CommitMessage) -> List[Problem]:
    if not message.subject_lines:
        return []
    first_line = message.subject_lines[0]
    stripped = first_line.text.lstrip()
    if not stripped or not stripped[0].islower():
        return []
    position = len(first_line.text) - len(stripped)
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.SUBJECT_NOT_CAPITALIZED, message)
        .with_label_for_span(first_line, position, position + 1, "Not capitalised")
        .with_url(GIT_COMMIT_GUIDELINES_URL)
        .build()
    ]
