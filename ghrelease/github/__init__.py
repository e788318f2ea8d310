"""GitHub API module."""

from .client import GitHubClient

__all__ = ["GitHubClient"]
