"""ghrelease - release notes from GitHub pull requests and issues."""

__version__ = "0.1.0"
