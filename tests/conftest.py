from __future__ import annotations

from typing import List

import pytest

from mitlint.commit import CommitMessage

SAMPLE_MESSAGES: List[str] = [
    "",
    "\n\n",
    "Add the login form\n",
    "Add the login form\n\nExplain why the form was needed.\n",
    "add the login form.\nNo blank line here\n",
    "x" * 73 + "\n",
    "Subject\n\n" + "y" * 80 + "\n" + "short line\n" + "z" * 75 + "\n",
    "feat(auth): add the login form\n\nRelates-to: [#12345678]\n",
    "\U0001f4e6 NEW: Add the login form\n",
    "WIP add the login form\n\nfeat: added things\n",
    "fix\n",
    "Subject\n\nBody JRA-123 text\n\nSigned-off-by: Someone <someone@example.com>\n"
    "Signed-off-by: Someone <someone@example.com>\n",
    "Close #642\n\n# Please enter the commit message for your changes.\n",
    "Subject\n\nBody\n\n# ------------------------ >8 ------------------------\n"
    "diff --git a/file b/file\n" + "q" * 90 + "\n",
    "Übergröße der Änderung anpassen\n\n" + "ä" * 73 + "\n",
]


@pytest.fixture
def sample_messages() -> List[CommitMessage]:
    """A small corpus covering clean, noisy and edge-case messages."""
    return [CommitMessage.from_text(text) for text in SAMPLE_MESSAGES]

