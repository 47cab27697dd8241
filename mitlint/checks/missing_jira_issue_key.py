"""Require a JIRA issue key."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "jira-issue-key-missing"
TITLE = "Your commit message is missing a JIRA Issue Key"
HELP_MESSAGE = (
    "It's important to add the issue key because it allows us to link code back to the "
    "motivations for doing it, and in some cases provide an audit trail for compliance "
    "purposes.\n\n"
    "You can fix this by adding a key like `JRA-123` to the commit message"
)
HELP_URL = (
    "https://support.atlassian.com/jira-software-cloud/docs/what-is-an-issue/"
    "#Workingwithissues-Projectkeys"
)

PATTERN = re.compile(r"(^| )[A-Z]{2,}-[0-9]+( |$)", re.MULTILINE)


@dataclass(frozen=True)
class JiraIssueKeyConfig:
    pattern: Pattern[str] = PATTERN


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, JiraIssueKeyConfig())


def lint_with_config(message: CommitMessage, config: JiraIssueKeyConfig) -> List[Problem]:
    if message.matches_pattern(config.pattern):
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.JIRA_ISSUE_KEY_MISSING, message)
        .with_label_at_last_line("No JIRA Issue Key")
        .with_url(HELP_URL)
        .build()
    ]
