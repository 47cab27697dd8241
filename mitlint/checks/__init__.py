"""Built-in lint checks, keyed by their canonical configuration name."""

from __future__ import annotations

from typing import Dict

from . import (
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
from .base import GIT_COMMIT_GUIDELINES_URL, Check

BUILTIN_CHECKS: Dict[str, Check] = {
    duplicate_trailers.NAME: duplicate_trailers.lint,
    missing_pivotal_tracker_id.NAME: missing_pivotal_tracker_id.lint,
    missing_jira_issue_key.NAME: missing_jira_issue_key.lint,
    missing_github_id.NAME: missing_github_id.lint,
    subject_not_separate_from_body.NAME: subject_not_separate_from_body.lint,
    subject_longer_than_72_characters.NAME: subject_longer_than_72_characters.lint,
    subject_not_capitalized.NAME: subject_not_capitalized.lint,
    subject_line_ends_with_period.NAME: subject_line_ends_with_period.lint,
    body_wider_than_72_characters.NAME: body_wider_than_72_characters.lint,
    not_conventional_commit.NAME: not_conventional_commit.lint,
    not_emoji_log.NAME: not_emoji_log.lint,
    missing_sign_off.NAME: missing_sign_off.lint,
    work_in_progress.NAME: work_in_progress.lint,
    placeholder_message.NAME: placeholder_message.lint,
    body_prefixed_with_commit_type.NAME: body_prefixed_with_commit_type.lint,
}

__all__ = ["BUILTIN_CHECKS", "Check", "GIT_COMMIT_GUIDELINES_URL"]
