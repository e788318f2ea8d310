"""Git access module."""

from .history import CommitRangeReader, CommitRecord, TagResolver, parse_commit_log
from .repository import GitRepository, parse_github_remote

__all__ = [
    "CommitRangeReader",
    "CommitRecord",
    "GitRepository",
    "TagResolver",
    "parse_commit_log",
    "parse_github_remote",
]
