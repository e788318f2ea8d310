"""Grouping of pull requests by their first related issue."""

from dataclasses import dataclass, field
from typing import Dict, List

from .extractor import extract_issue_numbers
from .fetcher import ReleaseData


@dataclass
class GroupedChanges:
    with_issues: Dict[str, List[str]] = field(default_factory=dict)
    without_issues: List[str] = field(default_factory=list)


def group_changes_by_issue(data: ReleaseData) -> GroupedChanges:
    """Group pull requests under the first issue each one references.

    Args:
        data: Fetched release data

    Returns:
        Pull request numbers per issue, plus those without any issue
    """
    grouped = GroupedChanges()

    for pr_number, pr in data.pull_requests.items():
        issue_numbers = extract_issue_numbers(pr)

        if not issue_numbers:
            grouped.without_issues.append(pr_number)
        else:
            grouped.with_issues.setdefault(issue_numbers[0], []).append(pr_number)

    return grouped
