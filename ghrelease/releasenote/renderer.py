"""Plain text rendering of release notes."""

from typing import List

from .fetcher import ReleaseData
from .grouper import GroupedChanges


LEAD_IN = "Copy release notes below"


def title_lines(title: str) -> List[str]:
    return ["", "", f"## {title}"]


def render_release_notes(data: ReleaseData, grouped: GroupedChanges) -> str:
    """Render grouped release data as the changelog text.

    Args:
        data: Fetched release data
        grouped: Grouping of the pull requests in ``data``

    Returns:
        Release notes, ending with a newline
    """
    lines = [LEAD_IN]
    lines.extend(title_lines("Changelog"))

    for issue_number, pr_numbers in grouped.with_issues.items():
        issue = data.issues.get(issue_number) or {}
        issue_title = issue.get('title') or f"Issue #{issue_number}"
        lines.append(f"- {issue_title} (#{issue_number})")

        for pr_number in pr_numbers:
            pr = data.pull_requests[pr_number]
            lines.append(f"  - {pr.get('title') or ''} (#{pr_number})")

    if grouped.without_issues:
        lines.append("")
        lines.append("### Other Changes")
        for pr_number in grouped.without_issues:
            pr = data.pull_requests[pr_number]
            lines.append(f"- {pr.get('title') or ''} (#{pr_number})")

    if data.contributors:
        lines.extend(title_lines("Contributors"))
        ranked = sorted(data.contributors.items(), key=lambda item: item[1], reverse=True)
        for login, count in ranked:
            lines.append(f"- @{login} ({count})")

    lines.extend(title_lines("Code Statistics"))
    lines.append(f"- Lines added: {data.stats.additions}")
    lines.append(f"- Lines deleted: {data.stats.deletions}")
    lines.append(f"- Files changed: {data.stats.changed_files}")

    return '\n'.join(lines) + '\n'
