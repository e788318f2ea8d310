"""Task context: the run/confirm/say capabilities the generator depends on."""

import subprocess
from typing import List, Protocol

import click


class TaskContext(Protocol):
    """Capabilities supplied by whoever drives the release notes generation."""

    def run(self, args: List[str]) -> str:
        """Run a command and return its stdout."""

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question."""

    def say(self, text: str) -> None:
        """Emit a status line."""


class ClickTaskContext:
    """Task context backed by subprocess and click prompts.

    Args:
        assume_yes: Answer every confirmation affirmatively without prompting
    """

    def __init__(self, assume_yes: bool = False):
        self.assume_yes = assume_yes

    def run(self, args: List[str]) -> str:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=True,
            encoding='utf-8',
            errors='replace'
        )
        return result.stdout

    def confirm(self, question: str) -> bool:
        if self.assume_yes:
            return True
        return click.confirm(question, default=False)

    def say(self, text: str) -> None:
        click.echo(text)
