"""Release notes generation from GitHub pull requests and issues."""

import logging
from typing import Callable, Optional

from ..config import Settings, get_settings
from ..context import TaskContext
from ..errors import ConfigurationError
from ..git import CommitRangeReader, GitRepository, TagResolver, parse_github_remote
from ..github import GitHubClient
from .extractor import extract_pr_numbers
from .fetcher import ReleaseDataFetcher
from .grouper import group_changes_by_issue
from .renderer import render_release_notes


class ReleaseNotesGenerator:
    """Generates release notes for the commits since a tag.

    Args:
        context: Task context used for git commands, prompts and output
        repository: Git repository; defaults to one running through ``context``
        settings: Settings; defaults to the environment
        client_factory: Builds the GitHub client once credentials are known
    """

    def __init__(self, context: TaskContext, repository: Optional[GitRepository] = None,
                 settings: Optional[Settings] = None,
                 client_factory: Callable[[Settings], GitHubClient] = GitHubClient,
                 logger: Optional[logging.Logger] = None):
        self.context = context
        self.repository = repository or GitRepository(context)
        self.settings = settings or get_settings()
        self.client_factory = client_factory
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, tag: Optional[str] = None) -> Optional[str]:
        """Generate release notes and emit them through the task context.

        Args:
            tag: Optional tag to compare from; the latest tag is offered if
                omitted

        Returns:
            The release notes, or None if no pull requests were found

        Raises:
            ValidationError: If the tag is unknown or was not confirmed
            ConfigurationError: If the GitHub project or credentials are missing
            GitError: If a git command fails
        """
        tag = TagResolver(self.repository, self.context).resolve(tag)

        org, project = parse_github_remote(self.repository.remote_url())
        if not org or not project:
            raise ConfigurationError(
                "GitHub project detection failed. Cannot generate release notes "
                "without GitHub API access."
            )
        self.logger.info(f"Detected GitHub project {org}/{project}")

        self.settings.require_credentials()

        commits = CommitRangeReader(self.repository).read(tag)
        pr_numbers = extract_pr_numbers(commits)

        if not pr_numbers:
            self.context.say('No pull requests found in the commit range.')
            return None

        client = self.client_factory(self.settings)
        fetcher = ReleaseDataFetcher(
            client,
            batch_size=self.settings.batch_size,
            batch_delay=self.settings.batch_delay,
        )
        try:
            release_data = fetcher.fetch(org, project, pr_numbers)
        finally:
            client.close()

        notes = render_release_notes(release_data, group_changes_by_issue(release_data))
        self.context.say(notes.rstrip("\n"))
        return notes
