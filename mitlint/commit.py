"""Parsed commit message consumed by the lints."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Tuple

SCISSORS_MARKER = "------------------------ >8 ------------------------"
DEFAULT_COMMENT_CHAR = "#"

_TRAILER_PATTERN = re.compile(r"^([A-Za-z0-9][A-Za-z0-9-]*): (.+)$")


def byte_length(text: str) -> int:
    """Return the UTF-8 encoded length of ``text``, lone surrogates included."""
    return len(text.encode("utf-8", errors="surrogatepass"))


@dataclass(frozen=True)
class Line:
    """A physical line of the raw message with its position."""

    text: str
    number: int
    offset: int

    @property
    def end(self) -> int:
        return self.offset + byte_length(self.text)

    def is_blank(self) -> bool:
        return not self.text.strip()

    def span(self, start: int = 0, end: Optional[int] = None) -> Tuple[int, int]:
        """Byte ``(offset, length)`` of the characters ``text[start:end]``."""
        prefix = self.text[:start]
        selected = self.text[start:end]
        return self.offset + byte_length(prefix), byte_length(selected)


@dataclass(frozen=True)
class Trailer:
    """A ``Key: value`` line from the final paragraph of the message."""

    key: str
    value: str
    line: Line


@dataclass(frozen=True)
class CommitMessage:
    """Immutable view of a commit message.

    Only ``text`` and ``comment_char`` take part in equality; every other
    attribute is derived from them when the message is created. Comment lines
    and anything below the scissors line are excluded from the subject, body
    and trailers but keep their place in ``lines`` so offsets stay valid.
    """

    text: str
    comment_char: str = DEFAULT_COMMENT_CHAR
    lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    content_lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    comment_lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    subject_lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    body_lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    trailers: Tuple[Trailer, ...] = field(init=False, repr=False, compare=False)
    has_scissors: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lines = _split_lines(self.text)
        scissors = f"{self.comment_char} {SCISSORS_MARKER}"
        visible: List[Line] = []
        has_scissors = False
        for line in lines:
            if line.text.rstrip() == scissors:
                has_scissors = True
                break
            visible.append(line)

        comments = tuple(line for line in visible if self._is_comment(line))
        content = tuple(line for line in visible if not self._is_comment(line))
        paragraphs = _paragraphs(content)
        subject = paragraphs[0] if paragraphs else ()
        body = _body_after(content, subject)
        trailers = _trailers(paragraphs[1:])

        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "content_lines", content)
        object.__setattr__(self, "comment_lines", comments)
        object.__setattr__(self, "subject_lines", subject)
        object.__setattr__(self, "body_lines", body)
        object.__setattr__(self, "trailers", trailers)
        object.__setattr__(self, "has_scissors", has_scissors)

    @classmethod
    def from_text(cls, text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> "CommitMessage":
        return cls(text=text, comment_char=comment_char)

    @property
    def subject(self) -> str:
        return "\n".join(line.text for line in self.subject_lines)

    @property
    def body(self) -> str:
        return "\n".join(line.text for line in self.body_lines)

    @property
    def content(self) -> str:
        """Message text without comments or the scissors section."""
        return "\n".join(line.text for line in self.content_lines)

    def matches_pattern(self, pattern: Pattern[str]) -> bool:
        return pattern.search(self.content) is not None

    def trailers_with_key(self, key: str) -> List[Trailer]:
        return [trailer for trailer in self.trailers if trailer.key == key]

    def last_line(self) -> Optional[Line]:
        """Return the last non-blank line, trailing whitespace removed."""
        for line in reversed(self.lines):
            if not line.is_blank():
                return Line(text=line.text.rstrip(), number=line.number, offset=line.offset)
        return None

    def line_number_at(self, offset: int) -> int:
        """Return the 1-based number of the line containing byte ``offset``."""
        if not self.lines:
            return 1
        starts = [line.offset for line in self.lines]
        index = max(bisect_right(starts, offset) - 1, 0)
        return self.lines[index].number

    def __str__(self) -> str:
        return self.text

    def _is_comment(self, line: Line) -> bool:
        return bool(self.comment_char) and line.text.startswith(self.comment_char)


def _split_lines(text: str) -> Tuple[Line, ...]:
    raw_lines = text.split("\n")
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()
    lines: List[Line] = []
    offset = 0
    for index, raw in enumerate(raw_lines):
        content = raw[:-1] if raw.endswith("\r") else raw
        lines.append(Line(text=content, number=index + 1, offset=offset))
        offset += byte_length(raw) + 1
    return tuple(lines)


def _paragraphs(lines: Tuple[Line, ...]) -> List[Tuple[Line, ...]]:
    paragraphs: List[Tuple[Line, ...]] = []
    current: List[Line] = []
    for line in lines:
        if line.is_blank():
            if current:
                paragraphs.append(tuple(current))
                current = []
            continue
        current.append(line)
    if current:
        paragraphs.append(tuple(current))
    return paragraphs


def _body_after(content: Tuple[Line, ...], subject: Tuple[Line, ...]) -> Tuple[Line, ...]:
    if not subject:
        return ()
    last_subject_number = subject[-1].number
    body = [line for line in content if line.number > last_subject_number]
    while body and body[0].is_blank():
        body.pop(0)
    while body and body[-1].is_blank():
        body.pop()
    return tuple(body)


def _trailers(paragraphs: List[Tuple[Line, ...]]) -> Tuple[Trailer, ...]:
    if not paragraphs:
        return ()
    trailers: List[Trailer] = []
    for line in paragraphs[-1]:
        match = _TRAILER_PATTERN.match(line.text.rstrip())
        if match is None:
            return ()
        trailers.append(Trailer(key=match.group(1), value=match.group(2), line=line))
    return tuple(trailers)


__all__ = [
    "CommitMessage",
    "DEFAULT_COMMENT_CHAR",
    "Line",
    "SCISSORS_MARKER",
    "Trailer",
    "byte_length",
]
