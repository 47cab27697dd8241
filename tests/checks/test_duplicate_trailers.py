"""Tests for the duplicated-trailers check."""

from __future__ import annotations

from mitlint.checks import duplicate_trailers
from mitlint.checks.duplicate_trailers import DuplicateTrailersConfig, lint, lint_with_config
from mitlint.commit import CommitMessage
from mitlint.models import Annotation, Code

PREAMBLE = "An example commit\n\nThis is an example commit without any duplicate trailers\n\n"
SIGN_OFF = "Signed-off-by: Billie Thompson <email@example.com>\n"
CO_AUTHOR = "Co-authored-by: Billie Thompson <email@example.com>\n"


def test_commit_without_trailers_passes() -> None:
    assert lint(CommitMessage.from_text(PREAMBLE)) == []


def test_repeated_sign_off() -> None:
    message = CommitMessage.from_text(PREAMBLE + SIGN_OFF + SIGN_OFF)

    problems = lint(message)

    assert len(problems) == 1
    problem = problems[0]
    assert problem.title == "Your commit message has duplicated trailers"
    assert problem.code == Code.DUPLICATED_TRAILERS
    assert problem.description.endswith('You can fix this by deleting the duplicated "Signed-off-by" field')
    assert problem.annotations == (Annotation("Duplicated `Signed-off-by`", 128, 50, 6),)
    assert problem.help_url == duplicate_trailers.HELP_URL


def test_repeated_co_author_and_relates_to() -> None:
    co_authored = lint(CommitMessage.from_text(PREAMBLE + CO_AUTHOR + CO_AUTHOR))
    relates_to = lint(CommitMessage.from_text(PREAMBLE + "Relates-to: #315\nRelates-to: #315\n"))

    assert co_authored[0].annotations == (Annotation("Duplicated `Co-authored-by`", 129, 51, 6),)
    assert relates_to[0].annotations == (Annotation("Duplicated `Relates-to`", 94, 16, 6),)


def test_every_duplicated_key_gets_a_problem_ordered_by_key() -> None:
    message = CommitMessage.from_text(PREAMBLE + SIGN_OFF + SIGN_OFF + CO_AUTHOR + CO_AUTHOR)

    problems = lint(message)

    assert [problem.annotations for problem in problems] == [
        (Annotation("Duplicated `Co-authored-by`", 231, 51, 8),),
        (Annotation("Duplicated `Signed-off-by`", 128, 50, 6),),
    ]


def test_distinct_values_are_not_duplicates() -> None:
    message = CommitMessage.from_text(
        PREAMBLE + SIGN_OFF + "Signed-off-by: Someone Else <someone@example.com>\n"
    )

    assert lint(message) == []


def test_other_trailer_keys_are_ignored() -> None:
    anything = "Anything: Billie Thompson <email@example.com>\n"

    assert lint(CommitMessage.from_text(PREAMBLE + anything + anything)) == []


def test_custom_keys() -> None:
    anything = "Anything: Billie Thompson <email@example.com>\n"
    message = CommitMessage.from_text(PREAMBLE + anything + anything)

    problems = lint_with_config(message, DuplicateTrailersConfig(keys=frozenset({"Anything"})))

    assert len(problems) == 1


def test_diff_below_scissors_is_ignored() -> None:
    message = CommitMessage.from_text(
        "Move to specdown\n"
        "# Lines starting with '#' will be ignored.\n"
        "\n"
        "# ------------------------ >8 ------------------------\n"
        "# Do not modify or remove the line above.\n"
        "diff --git a/Makefile b/Makefile\n"
        "\n"
        "Signed-off-by: Someone Else <someone@example.com>\n"
        "Signed-off-by: Someone Else <someone@example.com>\n"
    )

    assert lint(message) == []
