"""Subjects are titles and do not end with a full stop."""

from __future__ import annotations

from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder
from .base import GIT_COMMIT_GUIDELINES_URL

NAME = "subject-line-ends-with-period"
TITLE = "Your commit message ends with a period"
HELP_MESSAGE = (
    "It's important to keep your commits short, because we only have a limited number of "
    "characters to use (72) before the subject line is truncated. Full stops aren't normally "
    "in subject lines, and take up an extra character, so we shouldn't use them in commit "
    "message subjects.\n\nYou can fix this by removing the period"
)


def lint(message: CommitMessage) -> List[Problem]:
    if not message.subject_lines:
        return []
    last_line = message.subject_lines[-1]
    stripped = last_line.text.rstrip()
    if not stripped.endswith("."):
        return []
    period_count = len(stripped) - len(stripped.rstrip("."))
    start = len(stripped) - period_count
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.SUBJECT_ENDS_WITH_PERIOD, message)
        .with_label_for_span(last_line, start, len(stripped), "Unneeded period")
        .with_url(GIT_COMMIT_GUIDELINES_URL)
        .build()
    ]
