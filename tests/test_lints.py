"""Tests for the lint catalog and lint sets."""

from __future__ import annotations

import pytest

from mitlint.checks import BUILTIN_CHECKS
from mitlint.lints import CONFIG_KEY_PREFIX, Lint, Lints, UnknownLintError, UnknownLintsError
from mitlint.models import Code

CATALOG = [
    "duplicated-trailers",
    "pivotal-tracker-id-missing",
    "jira-issue-key-missing",
    "github-id-missing",
    "subject-not-separated-from-body",
    "subject-longer-than-72-characters",
    "subject-line-not-capitalized",
    "subject-line-ends-with-period",
    "body-wider-than-72-characters",
    "not-conventional-commit",
    "not-emoji-log",
    "sign-off-missing",
    "subject-is-work-in-progress",
    "placeholder-message",
    "body-prefixed-with-commit-type",
]


def test_catalog_order_and_names() -> None:
    assert [str(lint) for lint in Lint.all()] == CATALOG
    assert list(BUILTIN_CHECKS) == CATALOG
    assert [lint.position for lint in Lint] == list(range(len(CATALOG)))


def test_names_round_trip_through_from_name() -> None:
    for lint in Lint:
        assert Lint.from_name(str(lint)) is lint


def test_unknown_name_raises() -> None:
    with pytest.raises(UnknownLintError) as excinfo:
        Lint.from_name("not-a-real-lint")

    assert excinfo.value.name == "not-a-real-lint"
    assert str(excinfo.value) == "Lint not found: not-a-real-lint"


def test_every_lint_owns_exactly_one_code() -> None:
    assert [lint.codes for lint in Lint] == [(code,) for code in Code]


def test_config_keys_use_git_config_prefix() -> None:
    assert Lint.NOT_EMOJI_LOG.config_key == "mit.lint.not-emoji-log"
    assert all(lint.config_key.startswith(f"{CONFIG_KEY_PREFIX}.") for lint in Lint)


def test_default_lints() -> None:
    assert Lints.defaults().names() == [
        "duplicated-trailers",
        "subject-not-separated-from-body",
        "subject-longer-than-72-characters",
        "body-wider-than-72-characters",
    ]
    assert all(lint.enabled_by_default == (lint in Lints.defaults()) for lint in Lint)


def test_available_contains_every_lint() -> None:
    assert Lints.available().names() == CATALOG
    assert len(Lints.empty()) == 0


def test_from_names_keeps_known_and_reports_unknown() -> None:
    lints, errors = Lints.from_names(["subject-longer-than-72-characters", "not-a-real-lint"])

    assert lints == Lints([Lint.SUBJECT_LONGER_THAN_72_CHARACTERS])
    assert [error.name for error in errors] == ["not-a-real-lint"]


def test_from_names_strict_raises_with_every_unknown_name() -> None:
    with pytest.raises(UnknownLintsError) as excinfo:
        Lints.from_names(["nope", "not-emoji-log", "also-nope"], strict=True)

    assert [error.name for error in excinfo.value.errors] == ["nope", "also-nope"]
    assert "nope, also-nope" in str(excinfo.value)


def test_names_round_trip_for_every_subset() -> None:
    subsets = [
        Lints.empty(),
        Lints.defaults(),
        Lints.available(),
        Lints([Lint.NOT_EMOJI_LOG, Lint.DUPLICATED_TRAILERS]),
    ]
    for lints in subsets:
        restored, errors = Lints.from_names(lints.names())
        assert errors == []
        assert restored == lints


def test_iteration_is_catalog_order_regardless_of_construction() -> None:
    forwards = Lints([Lint.DUPLICATED_TRAILERS, Lint.NOT_EMOJI_LOG, Lint.GITHUB_ID_MISSING])
    backwards = Lints([Lint.GITHUB_ID_MISSING, Lint.NOT_EMOJI_LOG, Lint.DUPLICATED_TRAILERS])

    assert list(forwards) == list(backwards)
    assert forwards.names() == ["duplicated-trailers", "github-id-missing", "not-emoji-log"]


def test_duplicates_collapse() -> None:
    lints = Lints([Lint.NOT_EMOJI_LOG, Lint.NOT_EMOJI_LOG])

    assert len(lints) == 1
    assert lints.to_names() == ["not-emoji-log"]


def test_set_algebra() -> None:
    left = Lints([Lint.DUPLICATED_TRAILERS, Lint.NOT_EMOJI_LOG])
    right = Lints([Lint.NOT_EMOJI_LOG, Lint.GITHUB_ID_MISSING])

    assert (left | right).names() == ["duplicated-trailers", "github-id-missing", "not-emoji-log"]
    assert (left - right).names() == ["duplicated-trailers"]
    assert (left & right).names() == ["not-emoji-log"]
    assert left.merge(Lints.empty()) == left
    assert left.subtract(left) == Lints.empty()
    assert Lints.defaults() <= Lints.available()
    assert not left.issubset(right)


def test_lints_are_hashable_values() -> None:
    assert hash(Lints.defaults()) == hash(Lints(reversed(list(Lints.defaults()))))
    assert {Lints.defaults(), Lints.defaults()} == {Lints.defaults()}
    assert repr(Lints([Lint.NOT_EMOJI_LOG])) == "Lints(['not-emoji-log'])"


def test_lints_reject_non_lint_members() -> None:
    with pytest.raises(TypeError):
        Lints(["not-emoji-log"])  # type: ignore[list-item]


def test_to_config_covers_the_whole_catalog() -> None:
    config = Lints([Lint.NOT_EMOJI_LOG]).to_config()

    assert list(config) == CATALOG
    assert config["not-emoji-log"] is True
    assert sum(config.values()) == 1
    assert Lints.defaults().config_keys()[0] == "mit.lint.duplicated-trailers"
