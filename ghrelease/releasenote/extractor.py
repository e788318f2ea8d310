"""Pull request and issue number extraction."""

import re
from typing import Any, Dict, Iterable, List

from ..git import CommitRecord


# Tried in order; the first one that matches a commit wins for that commit
PR_NUMBER_PATTERNS = [
    # Standard merge
    re.compile(r'Merge pull request #(\d+)'),
    # Squash and merge
    re.compile(r'\(#(\d+)\)'),
    # Any other #123 reference
    re.compile(r'#(\d+)'),
]

# Applied cumulatively to a pull request's body and title
ISSUE_NUMBER_PATTERNS = [
    # Closing keywords
    re.compile(r'(?:close[sd]?|fix(?:e[sd])?|resolve[sd]?)\s+#(\d+)', re.IGNORECASE),
    re.compile(r'#(\d+)'),
]

BRANCH_NUMBER_RE = re.compile(r'(\d+)')


def unique(items: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def pr_nums_for_commit_from_message(commit: CommitRecord) -> List[str]:
    """Extract pull request numbers referenced by a single commit.

    Only the matches of the first pattern that matches are returned, so an
    unrelated ``#999`` in a merge commit is ignored.

    Args:
        commit: Commit record

    Returns:
        Pull request numbers in order of appearance
    """
    text = f"{commit.subject} {commit.body}"
    for pattern in PR_NUMBER_PATTERNS:
        matches = pattern.findall(text)
        if matches:
            return matches
    return []


def extract_pr_numbers(commits: Iterable[CommitRecord]) -> List[str]:
    """Extract unique pull request numbers from commits, first seen first."""
    numbers: List[str] = []
    for commit in commits:
        numbers.extend(pr_nums_for_commit_from_message(commit))
    return unique(numbers)


def extract_issue_numbers(pr: Dict[str, Any]) -> List[str]:
    """Extract issue numbers related to a pull request.

    Looks at closing keywords and plain ``#123`` references in the body and
    title, then at the first number in the source branch name.

    Args:
        pr: Pull request document from the API

    Returns:
        Unique issue numbers; closing-keyword matches come first
    """
    text = f"{pr.get('body') or ''} {pr.get('title') or ''}"

    numbers: List[str] = []
    for pattern in ISSUE_NUMBER_PATTERNS:
        numbers.extend(pattern.findall(text))

    branch = (pr.get('head') or {}).get('ref') or ''
    match = BRANCH_NUMBER_RE.search(branch)
    if match:
        numbers.append(match.group(1))

    return unique(numbers)
