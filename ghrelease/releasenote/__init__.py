"""Release note generation module."""

from .extractor import (
    extract_issue_numbers,
    extract_pr_numbers,
    pr_nums_for_commit_from_message,
)
from .fetcher import ReleaseData, ReleaseDataFetcher, ReleaseStats
from .generator import ReleaseNotesGenerator
from .grouper import GroupedChanges, group_changes_by_issue
from .renderer import render_release_notes

__all__ = [
    "extract_issue_numbers",
    "extract_pr_numbers",
    "pr_nums_for_commit_from_message",
    "ReleaseData",
    "ReleaseDataFetcher",
    "ReleaseStats",
    "ReleaseNotesGenerator",
    "GroupedChanges",
    "group_changes_by_issue",
    "render_release_notes",
]
