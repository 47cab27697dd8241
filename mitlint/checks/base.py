"""Shared contract for lint checks."""

from __future__ import annotations

from typing import Callable, List

from ..commit import CommitMessage
from ..models import Problem

GIT_COMMIT_GUIDELINES_URL = (
    "https://git-scm.com/book/en/v2/Distributed-Git-Contributing-to-a-Project#_commit_guidelines"
)

# A check is total: it returns an empty list rather than raising.
Check = Callable[[CommitMessage], List[Problem]]

__all__ = ["Check", "GIT_COMMIT_GUIDELINES_URL"]
