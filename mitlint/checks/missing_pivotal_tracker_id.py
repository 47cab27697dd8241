"""Require a Pivotal Tracker story reference."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "pivotal-tracker-id-missing"
TITLE = "Your commit message is missing a Pivotal Tracker ID"
HELP_MESSAGE = """It's important to add the ID because it allows code to be linked back to the stories it was \
done for, it can provide a chain of custody for code for audit purposes, and it can give \
future explorers of the codebase insight into the wider organisational need behind the \
change. We may also use it for automation purposes, like generating changelogs or \
notification emails.

You can fix this by adding the Id in one of the styles below to the commit message
[Delivers #12345678]
[fixes #12345678]
[finishes #12345678]
[#12345884 #12345678]
[#12345884,#12345678]
[#12345678],[#12345884]
This will address [#12345884]"""
HELP_URL = "https://www.pivotaltracker.com/help/api?version=v5#Tracker_Updates_in_SCM_Post_Commit_Hooks"

PATTERN = re.compile(
    r"\[(((finish|fix)(ed|es)?|complete[ds]?|deliver(s|ed)?) )?#\d+([, ]#\d+)*\]",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PivotalTrackerIdConfig:
    pattern: Pattern[str] = PATTERN


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, PivotalTrackerIdConfig())


def lint_with_config(message: CommitMessage, config: PivotalTrackerIdConfig) -> List[Problem]:
    if message.matches_pattern(config.pattern):
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.PIVOTAL_TRACKER_ID_MISSING, message)
        .with_label_at_last_line("No Pivotal Tracker ID")
        .with_url(HELP_URL)
        .build()
    ]
