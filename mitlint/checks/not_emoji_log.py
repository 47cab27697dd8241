"""Require subjects in the Emoji-Log style."""

from __future__ import annotations

from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "not-emoji-log"
TITLE = "Your commit message isn't in emoji log style"
HELP_URL = "https://github.com/ahmadawais/Emoji-Log"
PREFIXES = (
    "\U0001f4e6 NEW: ",
    "\U0001f44c IMPROVE: ",
    "\U0001f41b FIX: ",
    "\U0001f4d6 DOC: ",
    "\U0001f680 RELEASE: ",
    "\U0001f916 TEST: ",
    "\u203c\ufe0f BREAKING: ",
)
HELP_MESSAGE = (
    "It's important to follow the emoji log style when creating your commit message. By "
    "using this style we can automatically generate changelogs.\n\n"
    "You can fix it using one of the prefixes:\n\n"
    + "\n".join(prefix.rstrip() for prefix in PREFIXES)
    + f"\n\nYou can read more at {HELP_URL}"
)


def lint(message: CommitMessage) -> List[Problem]:
    if message.subject.startswith(PREFIXES):
        return []
    builder = ProblemBuilder(TITLE, HELP_MESSAGE, Code.NOT_EMOJI_LOG, message)
    if message.subject_lines:
        builder.with_label_for_span(message.subject_lines[0], 0, None, "Not emoji log")
    else:
        builder.with_label("Not emoji log", 0, 0)
    return [builder.with_url(HELP_URL).build()]
