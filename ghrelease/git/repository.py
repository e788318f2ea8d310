"""Git queries used to find the commit range of a release."""

import logging
import re
import subprocess
from typing import List, Optional, Tuple

from ..context import TaskContext
from ..errors import GitError


# Separates hash, subject and body in each log line
LOG_FIELD_DELIMITER = "¬¬"
LOG_FORMAT = f"%H{LOG_FIELD_DELIMITER}%s{LOG_FIELD_DELIMITER}%b"

# Covers git@github.com:org/repo(.git) and https://github.com/org/repo(.git)
GITHUB_REMOTE_RE = re.compile(r'github\.com[/:]([^/]+)/([^/]+?)(?:\.git)?/?$')


def parse_github_remote(remote: str) -> Tuple[Optional[str], Optional[str]]:
    """Extract organization and project from a GitHub remote URL.

    Args:
        remote: Remote URL as printed by ``git remote get-url``

    Returns:
        Tuple of (organization, project), or (None, None) if the URL does
        not point at GitHub
    """
    match = GITHUB_REMOTE_RE.search(remote.strip()) if remote else None
    if not match:
        return None, None
    return match.group(1), match.group(2)


class GitRepository:
    """Read-only git queries run through a task context."""

    def __init__(self, context: TaskContext, logger: Optional[logging.Logger] = None):
        self.context = context
        self.logger = logger or logging.getLogger(__name__)

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        self.logger.debug(f"Running git {' '.join(args)}")
        try:
            return self.context.run(['git', *args]) or ""
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr or ''}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def fetch(self) -> None:
        """Refresh remote-tracking refs and tags."""
        self._run_git('fetch')

    def list_tags(self) -> List[str]:
        """List all tag names."""
        return [line.strip() for line in self._run_git('tag').splitlines() if line.strip()]

    def list_tags_by_creation(self) -> List[str]:
        """List tag names, oldest first."""
        output = self._run_git(
            'for-each-ref', '--sort=creatordate', '--format=%(refname:short)', 'refs/tags'
        )
        return [line.strip() for line in output.splitlines() if line.strip()]

    def log(self, tag: Optional[str] = None) -> str:
        """Get the delimited commit log, optionally only the commits after ``tag``."""
        args = ['log', f'--pretty=format:{LOG_FORMAT}']
        if tag:
            args.append(f'{tag}..HEAD')
        return self._run_git(*args)

    def remote_url(self) -> str:
        """Get the origin remote URL, or an empty string if there is none."""
        try:
            return self._run_git('remote', 'get-url', 'origin').strip()
        except GitError as e:
            self.logger.debug(f"No origin remote: {e}")
            return ""
