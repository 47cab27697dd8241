"""Require a ``Signed-off-by`` trailer."""

from __future__ import annotations

from typing import List

from ..commit import CommitMessage
from ..models import Code, Problem, ProblemBuilder

NAME = "sign-off-missing"
TITLE = "Your commit message is missing a sign-off"
HELP_MESSAGE = (
    "A Signed-off-by trailer certifies that you wrote the change, or otherwise have the "
    "right to submit it under the project's license.\n\n"
    "You can fix this by committing with `git commit --signoff`, or by adding a line like "
    "the following at the end of the message:\n\n"
    "Signed-off-by: Your Name <you@example.com>"
)
HELP_URL = "https://developercertificate.org/"
SIGN_OFF_KEY = "signed-off-by"


def lint(message: CommitMessage) -> List[Problem]:
    if any(trailer.key.lower() == SIGN_OFF_KEY for trailer in message.trailers):
        return []
    return [
        ProblemBuilder(TITLE, HELP_MESSAGE, Code.SIGN_OFF_MISSING, message)
        .with_label_at_last_line("No sign-off")
        .with_url(HELP_URL)
        .build()
    ]
