"""Run a selection of lints against a commit message."""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor
from typing import List, Optional, Sequence

from .commit import CommitMessage
from .lints import Lint, Lints
from .logging import get_logger
from .models import Problem

_LOGGER = get_logger("engine")


def lint(message: CommitMessage, lints: Lints) -> List[Problem]:
    """Run every selected lint in catalog order and collect their problems."""
    selected = list(lints)
    _LOGGER.debug("Linting with %d lints: %s", len(selected), ", ".join(map(str, selected)))
    problems: List[Problem] = []
    for selected_lint in selected:
        problems.extend(selected_lint.lint(message))
    return problems


async def lint_async(
    message: CommitMessage,
    lints: Lints,
    *,
    executor: Optional[Executor] = None,
) -> List[Problem]:
    """Run the selected lints as concurrent tasks.

    Each lint runs in ``executor`` (the loop's default executor when omitted).
    The output is identical to :func:`lint`: every task owns the result slot
    at its lint's catalog position, so completion order never shows through.
    Cancelling the caller cancels the outstanding tasks.
    """
    selected = list(lints)
    if not selected:
        return []

    loop = asyncio.get_running_loop()
    slots: List[List[Problem]] = [[] for _ in selected]

    async def _run(index: int, selected_lint: Lint) -> None:
        slots[index] = await loop.run_in_executor(executor, selected_lint.lint, message)

    _LOGGER.debug("Dispatching %d lints concurrently", len(selected))
    await asyncio.gather(*(_run(index, selected_lint) for index, selected_lint in enumerate(selected)))
    return [problem for slot in slots for problem in slot]


def exit_code_for(problems: Sequence[Problem]) -> int:
    """Exit status for a hook: 0 when clean, else the first problem's code."""
    if not problems:
        return 0
    return problems[0].exit_code


__all__ = ["exit_code_for", "lint", "lint_async"]
