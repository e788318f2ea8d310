"""Tag resolution and commit range reading."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..context import TaskContext
from ..errors import ValidationError
from .repository import GitRepository, LOG_FIELD_DELIMITER


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitRecord:
    """A single commit from the log."""
    hash: str
    subject: str
    body: str = ""


def parse_commit_log(log: str) -> List[CommitRecord]:
    """Parse delimited ``git log`` output into commit records.

    Lines with fewer than two fields (such as continuation lines of
    multi-line bodies) are skipped.

    Args:
        log: Raw log output, one commit per line

    Returns:
        List of commit records in log order
    """
    if not log:
        return []

    commits = []
    for line in log.split('\n'):
        if not line.strip():
            continue

        parts = line.split(LOG_FIELD_DELIMITER, 2)
        if len(parts) < 2:
            continue

        commits.append(CommitRecord(
            hash=parts[0],
            subject=parts[1],
            body=parts[2] if len(parts) > 2 else '',
        ))

    return commits


class TagResolver:
    """Decides which tag the release notes are compared from."""

    def __init__(self, repository: GitRepository, context: TaskContext):
        self.repository = repository
        self.context = context

    def resolve(self, tag: Optional[str] = None) -> Optional[str]:
        """Resolve the tag to compare against.

        Args:
            tag: Explicit tag name, or None to offer the latest tag

        Returns:
            Tag name, or None to use the full history

        Raises:
            ValidationError: If the explicit tag does not exist or the latest
                tag was declined
        """
        self.repository.fetch()

        if tag:
            if tag not in self.repository.list_tags():
                raise ValidationError(f"The specified tag does not exist: {tag}")
            return tag

        tags = self.repository.list_tags_by_creation()
        if not tags:
            self.context.say('No tags found. Generating notes for all commits.')
            return None

        latest_tag = tags[-1]
        if self.context.confirm(f"Compare from the latest tag: {latest_tag}?"):
            logger.info(f"Comparing from tag {latest_tag}")
            return latest_tag

        raise ValidationError('No tag selected for comparison.')


class CommitRangeReader:
    """Reads the commits between a tag and HEAD."""

    def __init__(self, repository: GitRepository):
        self.repository = repository

    def read(self, tag: Optional[str] = None) -> List[CommitRecord]:
        commits = parse_commit_log(self.repository.log(tag))
        logger.debug(f"Read {len(commits)} commits since {tag or 'the first commit'}")
        return commits
