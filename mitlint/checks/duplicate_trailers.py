"""Detect trailers that were added more than once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Set, Tuple

from ..commit import CommitMessage, Trailer
from ..models import Code, Problem, ProblemBuilder

NAME = "duplicated-trailers"
TITLE = "Your commit message has duplicated trailers"
HELP_URL = "https://git-scm.com/docs/githooks#_commit_msg"
TRAILERS_TO_CHECK_FOR_DUPLICATES = frozenset({"Signed-off-by", "Co-authored-by", "Relates-to"})


@dataclass(frozen=True)
class DuplicateTrailersConfig:
    keys: FrozenSet[str] = TRAILERS_TO_CHECK_FOR_DUPLICATES


def lint(message: CommitMessage) -> List[Problem]:
    return lint_with_config(message, DuplicateTrailersConfig())


def lint_with_config(message: CommitMessage, config: DuplicateTrailersConfig) -> List[Problem]:
    """Report one problem for every repeat of an identical trailer.

    The first occurrence is the legitimate one; each later copy gets its own
    problem pointing at its line. Problems are ordered by trailer key, then by
    position in the message.
    """
    return [_problem(message, trailer) for trailer in duplicated_trailers(message, config.keys)]


def duplicated_trailers(message: CommitMessage, keys: FrozenSet[str]) -> List[Trailer]:
    seen: Set[Tuple[str, str]] = set()
    repeats: List[Trailer] = []
    for trailer in message.trailers:
        if trailer.key not in keys:
            continue
        identity = (trailer.key, trailer.value.strip())
        if identity in seen:
            repeats.append(trailer)
        else:
            seen.add(identity)
    return sorted(repeats, key=lambda trailer: (trailer.key, trailer.line.number))


def _description(key: str) -> str:
    return (
        "These are normally added accidentally when you're rebasing or amending to a "
        "commit, sometimes in the text editor, but often by git hooks.\n\n"
        f'You can fix this by deleting the duplicated "{key}" field'
    )


def _problem(message: CommitMessage, trailer: Trailer) -> Problem:
    return (
        ProblemBuilder(TITLE, _description(trailer.key), Code.DUPLICATED_TRAILERS, message)
        .with_label_for_span(trailer.line, 0, len(trailer.line.text.rstrip()), f"Duplicated `{trailer.key}`")
        .with_url(HELP_URL)
        .build()
    )
