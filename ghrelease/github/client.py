"""GitHub REST API client using requests."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Settings
from ..errors import GitHubAPIError


ACCEPT_HEADER = "application/vnd.github.v3+json"
USER_AGENT = "ghrelease"


class GitHubClient:
    """Read-only access to pull requests and issues of a repository."""

    def __init__(self, config: Settings, logger: Optional[logging.Logger] = None,
                 session: Optional[requests.Session] = None):
        """Initialize GitHub client.

        Args:
            config: Settings holding the API URL and credentials
            logger: Logger instance
            session: Optional pre-built session, mostly for tests
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        self.session = session or requests.Session()
        self.session.auth = (config.github_username or '', config.github_access_token or '')
        self.session.headers.update({
            'Accept': ACCEPT_HEADER,
            'User-Agent': USER_AGENT,
        })

    def get(self, path: str) -> Optional[Dict[str, Any]]:
        """GET an API path.

        Args:
            path: Path relative to the API base, e.g. ``repos/org/project/pulls/1``

        Returns:
            Decoded JSON document, or None if the resource does not exist

        Raises:
            GitHubAPIError: If the API answers with any other non-200 status
            requests.RequestException: On transport failures
        """
        url = f"{self.config.api_url}{path.lstrip('/')}"
        self.logger.debug(f"GET {url}")

        response = self.session.get(url, timeout=self.config.timeout, allow_redirects=True)

        if response.status_code == 404:
            # Expected, e.g. a "#123" reference that is an issue, not a PR
            self.logger.debug(f"Not found: {path}")
            return None

        if response.status_code != 200:
            try:
                detail = response.json()
                if isinstance(detail, dict):
                    detail = detail.get('message', detail)
            except ValueError:
                detail = response.text
            raise GitHubAPIError(response.status_code, detail)

        return response.json()

    def get_pull_request(self, org: str, project: str, number: str) -> Optional[Dict[str, Any]]:
        """Get pull request by number.

        Returns:
            Pull request document or None if not found
        """
        return self.get(f"repos/{org}/{project}/pulls/{number}")

    def get_issue(self, org: str, project: str, number: str) -> Optional[Dict[str, Any]]:
        """Get issue by number.

        Returns:
            Issue document or None if not found
        """
        return self.get(f"repos/{org}/{project}/issues/{number}")

    def close(self) -> None:
        self.session.close()
