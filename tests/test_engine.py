"""Tests for the sequential and concurrent evaluators."""

from __future__ import annotations

import asyncio
import random
from concurrent.futures import ThreadPoolExecutor
from typing import List

from mitlint.checks import GIT_COMMIT_GUIDELINES_URL
from mitlint.commit import CommitMessage
from mitlint.engine import exit_code_for, lint, lint_async
from mitlint.lints import Lint, Lints
from mitlint.models import Annotation, Code, Problem


def _subsets() -> List[Lints]:
    rng = random.Random(1234)
    lints = list(Lint)
    subsets = [Lints.empty(), Lints.defaults(), Lints.available()]
    subsets.extend(Lints([lint]) for lint in lints)
    for _ in range(10):
        subsets.append(Lints(rng.sample(lints, rng.randint(2, len(lints) - 1))))
    return subsets


def test_long_subject_reports_a_single_problem() -> None:
    message = CommitMessage.from_text("x" * 73 + "\n")

    problems = lint(message, Lints([Lint.SUBJECT_LONGER_THAN_72_CHARACTERS]))

    assert problems == [
        Problem(
            title="Your subject is longer than 72 characters",
            description=(
                "It's important to keep the subject of the commit less than 72 characters "
                "because when you look at the git log, that's where it truncates the message. "
                "This means that people won't get the entirety of the information in your "
                "commit.\n\nPlease keep the subject line 72 characters or under"
            ),
            code=Code.SUBJECT_LONGER_THAN_72_CHARACTERS,
            source="x" * 73 + "\n",
            annotations=(Annotation("Too long", 72, 1, 1),),
            help_url=GIT_COMMIT_GUIDELINES_URL,
        )
    ]
    assert exit_code_for(problems) == int(Code.SUBJECT_LONGER_THAN_72_CHARACTERS)


def test_empty_selection_finds_nothing(sample_messages: List[CommitMessage]) -> None:
    for message in sample_messages:
        assert lint(message, Lints.empty()) == []
        assert asyncio.run(lint_async(message, Lints.empty())) == []


def test_results_follow_catalog_order() -> None:
    message = CommitMessage.from_text("fix.\nmore\n")

    problems = lint(message, Lints.available())
    positions = [Lint[problem.code.name].position for problem in problems]

    assert positions == sorted(positions)


def test_concurrent_evaluator_matches_sequential(sample_messages: List[CommitMessage]) -> None:
    for message in sample_messages:
        for lints in _subsets():
            assert asyncio.run(lint_async(message, lints)) == lint(message, lints)


def test_concurrent_evaluator_with_custom_executor(sample_messages: List[CommitMessage]) -> None:
    with ThreadPoolExecutor(max_workers=3) as executor:
        for message in sample_messages:
            expected = lint(message, Lints.available())
            assert asyncio.run(lint_async(message, Lints.available(), executor=executor)) == expected


def test_construction_order_does_not_change_results(sample_messages: List[CommitMessage]) -> None:
    rng = random.Random(42)
    for message in sample_messages:
        members = list(Lint)
        rng.shuffle(members)
        assert lint(message, Lints(members)) == lint(message, Lints.available())


def _is_ordered_subsequence(smaller: List[Problem], larger: List[Problem]) -> bool:
    remaining = iter(larger)
    return all(any(problem == candidate for candidate in remaining) for problem in smaller)


def test_ordered_subsequence_helper() -> None:
    first, second = lint(CommitMessage.from_text("fix.\nmore\n"), Lints.available())[:2]

    assert _is_ordered_subsequence([first, second], [first, second])
    assert not _is_ordered_subsequence([second, first], [first, second])


def test_adding_lints_keeps_existing_problems_in_order(sample_messages: List[CommitMessage]) -> None:
    for message in sample_messages:
        for lints in _subsets():
            smaller = lint(message, lints)
            for extra in (Lints.defaults(), Lints.available()):
                larger = lint(message, lints | extra)
                assert _is_ordered_subsequence(smaller, larger)


def test_evaluation_is_idempotent(sample_messages: List[CommitMessage]) -> None:
    for message in sample_messages:
        assert lint(message, Lints.available()) == lint(message, Lints.available())


def test_clean_message_passes_the_defaults() -> None:
    message = CommitMessage.from_text("Add the login form\n\nExplain why the form was needed.\n")

    problems = lint(message, Lints.defaults())

    assert problems == []
    assert exit_code_for(problems) == 0


def test_exit_code_uses_the_first_problem() -> None:
    message = CommitMessage.from_text("Subject\nsecond line\n" + "x" * 80 + "\n")

    problems = lint(message, Lints.defaults())

    assert [problem.code for problem in problems] == [Code.SUBJECT_NOT_SEPARATE_FROM_BODY]
    assert exit_code_for(problems) == 10


def test_messages_with_lone_surrogates_can_be_linted() -> None:
    message = CommitMessage.from_text("\ud800" * 73 + "\n")

    problems = lint(message, Lints.available())

    subject_problems = [p for p in problems if p.code == Code.SUBJECT_LONGER_THAN_72_CHARACTERS]
    assert subject_problems[0].annotations == (Annotation("Too long", 216, 3, 1),)
    assert asyncio.run(lint_async(message, Lints.available())) == problems
