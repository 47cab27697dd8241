"""Problem model shared by every lint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple

from .commit import CommitMessage, Line


class Code(IntEnum):
    """Kinds of problem a lint can report.

    Values are used as process exit codes by hook runners and never change.
    Codes below 6 are reserved for the runner's own failures.
    """

    DUPLICATED_TRAILERS = 6
    PIVOTAL_TRACKER_ID_MISSING = 7
    JIRA_ISSUE_KEY_MISSING = 8
    GITHUB_ID_MISSING = 9
    SUBJECT_NOT_SEPARATE_FROM_BODY = 10
    SUBJECT_LONGER_THAN_72_CHARACTERS = 11
    SUBJECT_NOT_CAPITALIZED = 12
    SUBJECT_ENDS_WITH_PERIOD = 13
    BODY_WIDER_THAN_72_CHARACTERS = 14
    NOT_CONVENTIONAL_COMMIT = 15
    NOT_EMOJI_LOG = 16
    SIGN_OFF_MISSING = 17
    WORK_IN_PROGRESS = 18
    PLACEHOLDER_MESSAGE = 19
    BODY_PREFIXED_WITH_COMMIT_TYPE = 20


class Annotation(NamedTuple):
    """Highlights part of the message: a byte span plus the line it starts on."""

    label: str
    offset: int
    length: int
    line: int


@dataclass(frozen=True)
class Problem:
    """A single violated lint, with enough context to render a diagnostic."""

    title: str
    description: str
    code: Code
    source: str
    annotations: Tuple[Annotation, ...] = ()
    help_url: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return int(self.code)

    def excerpts(self) -> Iterator[Tuple[Annotation, str]]:
        """Yield each annotation with the text it points at."""
        encoded = self.source.encode("utf-8", errors="surrogatepass")
        for annotation in self.annotations:
            chunk = encoded[annotation.offset : annotation.offset + annotation.length]
            yield annotation, chunk.decode("utf-8", errors="surrogatepass")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "code": self.code.name,
            "exit_code": self.exit_code,
            "annotations": [annotation._asdict() for annotation in self.annotations],
            "help_url": self.help_url,
        }


@dataclass
class ProblemBuilder:
    """Fluent helper the checks use to assemble a :class:`Problem`."""

    title: str
    description: str
    code: Code
    message: CommitMessage
    labels: List[Annotation] = field(default_factory=list)
    url: Optional[str] = None

    def with_url(self, url: str) -> "ProblemBuilder":
        self.url = url
        return self

    def with_label(self, text: str, offset: int, length: int) -> "ProblemBuilder":
        line = self.message.line_number_at(offset)
        self.labels.append(Annotation(label=text, offset=offset, length=length, line=line))
        return self

    def with_label_for_line(self, line: Line, limit: int, text: str) -> "ProblemBuilder":
        """Label the characters of ``line`` past ``limit``; no-op when it fits."""
        if len(line.text) <= limit:
            return self
        offset, length = line.span(limit)
        return self.with_label(text, offset, length)

    def with_label_for_span(self, line: Line, start: int, end: Optional[int], text: str) -> "ProblemBuilder":
        offset, length = line.span(start, end)
        return self.with_label(text, offset, length)

    def with_label_at_last_line(self, text: str) -> "ProblemBuilder":
        """Label the last non-blank line, used when something is missing."""
        last = self.message.last_line()
        if last is None:
            return self.with_label(text, 0, 0)
        offset, length = last.span()
        return self.with_label(text, offset, length)

    def build(self) -> Problem:
        return Problem(
            title=self.title,
            description=self.description,
            code=self.code,
            source=self.message.text,
            annotations=tuple(self.labels),
            help_url=self.url,
        )


__all__ = ["Annotation", "Code", "Problem", "ProblemBuilder"]
