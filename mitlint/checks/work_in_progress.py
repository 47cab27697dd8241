"""Catch commits still marked as unfinished."""

from __future__ import annotations

import re
from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "subject-is-work-in-progress"
TITLE = "Your commit message is marked as work in progress"
HELP_MESSAGE = (
    "Work in progress commits are meant to be squashed or reworded before they are shared. "
    "Left in the history they make changes harder to review, bisect and revert.\n\n"
    "You can fix this by finishing the change and rewording the subject, or by running "
    "`git rebase --autosquash` for fixup and squash commits"
)
HELP_URL = "https://git-scm.com/docs/git-rebase#Documentation/git-rebase.txt---autosquash"

MARKER_PATTERN = re.compile(r"^\s*(?P<marker>\[wip\]|wip\b|fixup!|squash!|amend!)", re.IGNORECASE)


def lint(message: CommitMessage) -> List[Problem]:
    if not message.subject_lines:
        return []
    first_line = message.subject_lines[0]
    match = MARKER_PATTERN.match(first_line.text)
    if match is None:
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.WORK_IN_PROGRESS, message)
        .with_label_for_span(first_line, match.start("marker"), match.end("marker"), "Work in progress")
        .with_url(HELP_URL)
        .build()
    ]
