"""Exception hierarchy for ghrelease."""

from typing import Any, Dict, Optional


class GHReleaseError(RuntimeError):
    """Base exception that carries structured context."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(GHReleaseError):
    """Raised when credentials or the GitHub project cannot be determined."""


class ValidationError(GHReleaseError):
    """Raised when the comparison tag is missing or was not confirmed."""


class GitError(GHReleaseError):
    """Raised when a git command fails."""


class TransientFetchError(GHReleaseError):
    """Raised when a single API resource could not be fetched."""


class GitHubAPIError(TransientFetchError):
    """Raised when the GitHub API answers with an unexpected status."""

    def __init__(self, status_code: int, detail: Any = None) -> None:
        super().__init__(
            f"GitHub API request failed (HTTP {status_code}): {detail or 'Unknown error'}",
            context={"status_code": status_code, "detail": detail},
        )
        self.status_code = status_code
        self.detail = detail


__all__ = [
    "GHReleaseError",
    "ConfigurationError",
    "ValidationError",
    "GitError",
    "TransientFetchError",
    "GitHubAPIError",
]
