"""Commit type prefixes belong on the subject, not the body."""

from __future__ import annotations

import re
from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "body-prefixed-with-commit-type"
TITLE = "Your commit body starts with a commit type prefix"
HELP_MESSAGE = (
    "Commit type prefixes such as \"feat:\" describe the whole change and belong on the "
    "subject line, if anywhere. Repeating one at the start of the body adds noise for "
    "everyone reading the history.\n\n"
    "You can fix this by removing the prefix from the body"
)
HELP_URL = "https://www.conventionalcommits.org/"

PREFIX_PATTERN = re.compile(
    r"^\s*(?P<prefix>(?:feat|fix|docs|style|refactor|perf|test|build|ci|chore|revert)"
    r"(?:\([^()]*\))?!?:)(?:\s|$)",
    re.IGNORECASE,
)


def lint(message: CommitMessage) -> List[Problem]:
    if not message.body_lines:
        return []
    first_line = message.body_lines[0]
    match = PREFIX_PATTERN.match(first_line.text)
    if match is None:
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.BODY_PREFIXED_WITH_COMMIT_TYPE, message)
        .with_label_for_span(first_line, match.start("prefix"), match.end("prefix"), "Unneeded prefix")
        .with_url(HELP_URL)
        .build()
    ]
