"""Keep body lines narrow enough to read in a terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder
from .base import GIT_COMMIT_GUIDELINES_URL

NAME = "body-wider-than-72-characters"
TITLE = "Your commit has a body wider than 72 characters"
HELP_MESSAGE = (
    "It's important to keep the body of the commit narrower than 72 characters because when "
    "you look at the git log, that's where it truncates the message. This means that people "
    "won't get the entirety of the information in your commit.\n\n"
    "You can fix this by making the lines in your body no more than 72 characters"
)
CHARACTER_LIMIT = 72


@dataclass(frozen=True)
class BodyWidthConfig:
    character_limit: int = CHARACTER_LIMIT


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, BodyWidthConfig())


def lint_with_config(message: CommitMessage, config: BodyWidthConfig) -> List[Problem]:
    """One problem for the whole body, with a label on every wide line."""
    wide_lines = [line for line in message.body_lines if len(line.text) > config.character_limit]
    if not wide_lines:
        return []
    builder = ProblemBuilder(TITLE, HELP_MESSAGE, Code.BODY_WIDER_THAN_72_CHARACTERS, message)
    builder.with_url(GIT_COMMIT_GUIDELINES_URL)
    for line in wide_lines:
        builder.with_label_for_line(line, config.character_limit, "Too long")
    return [builder.build()]
