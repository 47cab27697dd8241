"""Lint catalog and lint selection sets."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Sequence, Tuple

from . import checks
from .checks import (
    body_prefixed_with_commit_type,
    body_wider_than_72_characters,
    duplicate_trailers,
    missing_github_id,
    missing_jira_issue_key,
    missing_pivotal_tracker_id,
    missing_sign_off,
    not_conventional_commit,
    not_emoji_log,
    placeholder_message,
    subject_line_ends_with_period,
    subject_longer_than_72_characters,
    subject_not_capitalized,
    subject_not_separate_from_body,
    work_in_progress,
)
from .commit import CommitMessage
from .models import Code, Problem

CONFIG_KEY_PREFIX = "mit.lint"


class UnknownLintError(ValueError):
    """Raised when a lint name does not match any lint in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Lint not found: {name}")
        self.name = name


class UnknownLintsError(ValueError):
    """Raised by strict name resolution when any name is unknown."""

    def __init__(self, errors: Sequence[UnknownLintError]) -> None:
        names = ", ".join(error.name for error in errors)
        super().__init__(f"Unknown lints requested: {names}")
        self.errors = list(errors)


class Lint(Enum):
    """Every lint the package ships; the value is the canonical name.

    Definition order is the catalog order: evaluators always run and report
    lints in this order, whatever order a selection was built in.
    """

    DUPLICATED_TRAILERS = duplicate_trailers.NAME
    PIVOTAL_TRACKER_ID_MISSING = missing_pivotal_tracker_id.NAME
    JIRA_ISSUE_KEY_MISSING = missing_jira_issue_key.NAME
    GITHUB_ID_MISSING = missing_github_id.NAME
    SUBJECT_NOT_SEPARATE_FROM_BODY = subject_not_separate_from_body.NAME
    SUBJECT_LONGER_THAN_72_CHARACTERS = subject_longer_than_72_characters.NAME
    SUBJECT_NOT_CAPITALIZED = subject_not_capitalized.NAME
    SUBJECT_ENDS_WITH_PERIOD = subject_line_ends_with_period.NAME
    BODY_WIDER_THAN_72_CHARACTERS = body_wider_than_72_characters.NAME
    NOT_CONVENTIONAL_COMMIT = not_conventional_commit.NAME
    NOT_EMOJI_LOG = not_emoji_log.NAME
    SIGN_OFF_MISSING = missing_sign_off.NAME
    WORK_IN_PROGRESS = work_in_progress.NAME
    PLACEHOLDER_MESSAGE = placeholder_message.NAME
    BODY_PREFIXED_WITH_COMMIT_TYPE = body_prefixed_with_commit_type.NAME

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Lint":
        try:
            return cls(name)
        except ValueError:
            raise UnknownLintError(name) from None

    @classmethod
    def all(cls) -> List["Lint"]:
        return list(cls)

    @property
    def position(self) -> int:
        return _POSITIONS[self]

    @property
    def enabled_by_default(self) -> bool:
        return self in _DEFAULT_ENABLED

    @property
    def config_key(self) -> str:
        """Key for this lint in a git-config style document."""
        return f"{CONFIG_KEY_PREFIX}.{self.value}"

    @property
    def codes(self) -> Tuple[Code, ...]:
        return _CODES[self]

    def lint(self, message: CommitMessage) -> List[Problem]:
        return list(_CHECKS[self](message))


_POSITIONS: Dict[Lint, int] = {lint: index for index, lint in enumerate(Lint)}

# A missing entry fails at import time rather than when the lint first runs.
_CHECKS: Dict[Lint, checks.Check] = {lint: checks.BUILTIN_CHECKS[lint.value] for lint in Lint}

_CODES: Dict[Lint, Tuple[Code, ...]] = {lint: (Code[lint.name],) for lint in Lint}

_DEFAULT_ENABLED: FrozenSet[Lint] = frozenset(
    {
        Lint.DUPLICATED_TRAILERS,
        Lint.SUBJECT_NOT_SEPARATE_FROM_BODY,
        Lint.SUBJECT_LONGER_THAN_72_CHARACTERS,
        Lint.BODY_WIDER_THAN_72_CHARACTERS,
    }
)


class Lints:
    """An immutable set of lints.

    Membership is all that matters: duplicates collapse, and iteration is
    always in catalog order so serialized output and lint results are stable.
    """

    __slots__ = ("_lints",)

    def __init__(self, lints: Iterable[Lint] = ()) -> None:
        members = frozenset(lints)
        for member in members:
            if not isinstance(member, Lint):
                raise TypeError(f"Lints can only contain Lint members, got {member!r}")
        self._lints: FrozenSet[Lint] = members

    @classmethod
    def available(cls) -> "Lints":
        return cls(Lint)

    @classmethod
    def defaults(cls) -> "Lints":
        return cls(_DEFAULT_ENABLED)

    @classmethod
    def empty(cls) -> "Lints":
        return cls()

    @classmethod
    def from_names(
        cls, names: Iterable[str], *, strict: bool = False
    ) -> Tuple["Lints", List[UnknownLintError]]:
        """Resolve each name on its own.

        Unknown names are returned as errors next to the lints that did
        resolve, leaving the caller to decide whether to carry on. With
        ``strict`` any unknown name raises :class:`UnknownLintsError`.
        """
        found: List[Lint] = []
        errors: List[UnknownLintError] = []
        for name in names:
            try:
                found.append(Lint.from_name(name))
            except UnknownLintError as exc:
                errors.append(exc)
        if strict and errors:
            raise UnknownLintsError(errors)
        return cls(found), errors

    def names(self) -> List[str]:
        return [lint.value for lint in self]

    to_names = names

    def config_keys(self) -> List[str]:
        return [lint.config_key for lint in self]

    def to_config(self) -> Dict[str, bool]:
        """Map every catalog lint to whether this set enables it."""
        return {lint.value: lint in self._lints for lint in Lint}

    def merge(self, other: "Lints") -> "Lints":
        return Lints(self._lints | other._lints)

    def subtract(self, other: "Lints") -> "Lints":
        return Lints(self._lints - other._lints)

    def intersection(self, other: "Lints") -> "Lints":
        return Lints(self._lints & other._lints)

    def issubset(self, other: "Lints") -> bool:
        return self._lints <= other._lints

    __or__ = merge
    __sub__ = subtract
    __and__ = intersection
    __le__ = issubset

    def __iter__(self) -> Iterator[Lint]:
        return iter(sorted(self._lints, key=_POSITIONS.__getitem__))

    def __len__(self) -> int:
        return len(self._lints)

    def __contains__(self, lint: object) -> bool:
        return lint in self._lints

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lints):
            return NotImplemented
        return self._lints == other._lints

    def __hash__(self) -> int:
        return hash(self._lints)

    def __repr__(self) -> str:
        return f"Lints({self.names()!r})"


__all__ = [
    "CONFIG_KEY_PREFIX",
    "Lint",
    "Lints",
    "UnknownLintError",
    "UnknownLintsError",
]
