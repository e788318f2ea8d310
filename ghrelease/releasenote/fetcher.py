"""Batched retrieval of pull requests and issues from GitHub."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set

import requests

from ..errors import TransientFetchError
from .extractor import extract_issue_numbers


DEFAULT_BATCH_SIZE = 10
DEFAULT_BATCH_DELAY = 0.1


@dataclass
class ReleaseStats:
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0


@dataclass
class ReleaseData:
    """Everything fetched for one release, keyed by number in fetch order."""
    pull_requests: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    issues: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    contributors: Dict[str, int] = field(default_factory=dict)
    stats: ReleaseStats = field(default_factory=ReleaseStats)

    def add_contributor(self, document: Dict[str, Any]) -> None:
        """Count the author of a pull request or issue document."""
        login = (document.get('user') or {}).get('login')
        if login:
            self.contributors[login] = self.contributors.get(login, 0) + 1


def chunks(items: List[str], size: int) -> List[List[str]]:
    """Split items into lists of at most ``size`` elements."""
    return [items[i:i + size] for i in range(0, len(items), size)]


class ReleaseDataFetcher:
    """Fetches pull requests and their issues, tolerating per-item failures.

    Args:
        client: Object with ``get_pull_request`` and ``get_issue`` methods
        batch_size: Number of pull requests per batch
        batch_delay: Seconds to wait after each batch
        sleep: Sleep function, replaceable in tests
    """

    def __init__(self, client, batch_size: int = DEFAULT_BATCH_SIZE,
                 batch_delay: float = DEFAULT_BATCH_DELAY,
                 sleep: Callable[[float], None] = time.sleep,
                 logger: Optional[logging.Logger] = None):
        self.client = client
        self.batch_size = batch_size
        self.batch_delay = batch_delay
        self.sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

    def fetch(self, org: str, project: str, pr_numbers: List[str]) -> ReleaseData:
        """Fetch all release data.

        Args:
            org: GitHub organization
            project: GitHub project name
            pr_numbers: Pull request numbers in commit order

        Returns:
            Release data; items that could not be fetched are left out
        """
        self.logger.info(f"Fetching data for {len(pr_numbers)} pull requests...")

        data = ReleaseData()
        # Issue numbers already requested, including 404s and failures
        attempted_issues: Set[str] = set()

        for batch in chunks(pr_numbers, self.batch_size):
            for pr_number in batch:
                self._fetch_pull_request(org, project, pr_number, data, attempted_issues)

            # Rate limit courtesy delay between batches
            self.sleep(self.batch_delay)

        return data

    def _fetch_pull_request(self, org: str, project: str, pr_number: str,
                            data: ReleaseData, attempted_issues: Set[str]) -> None:
        try:
            pr = self.client.get_pull_request(org, project, pr_number)
        except (TransientFetchError, requests.RequestException) as e:
            self.logger.warning(f"Failed to fetch PR #{pr_number}: {e}")
            return

        if not pr:
            return

        data.pull_requests[pr_number] = pr
        data.add_contributor(pr)

        data.stats.additions += pr.get('additions') or 0
        data.stats.deletions += pr.get('deletions') or 0
        data.stats.changed_files += pr.get('changed_files') or 0

        for issue_number in extract_issue_numbers(pr):
            if issue_number not in attempted_issues:
                attempted_issues.add(issue_number)
                self._fetch_issue(org, project, issue_number, data)

    def _fetch_issue(self, org: str, project: str, issue_number: str,
                     data: ReleaseData) -> None:
        try:
            issue = self.client.get_issue(org, project, issue_number)
        except (TransientFetchError, requests.RequestException) as e:
            self.logger.warning(f"Failed to fetch issue #{issue_number}: {e}")
            return

        if not issue:
            return

        data.issues[issue_number] = issue
        data.add_contributor(issue)
