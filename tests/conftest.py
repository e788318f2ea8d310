"""Shared fixtures: a scripted task context and a clean environment."""

import subprocess

import pytest


class FakeContext:
    """Task context answering git commands from a table keyed by subcommand."""

    def __init__(self, outputs=None, answer=True):
        self.outputs = outputs or {}
        self.answer = answer
        self.commands = []
        self.questions = []
        self.said = []

    def run(self, args):
        self.commands.append(args)
        output = self.outputs.get(args[1], "")
        if isinstance(output, Exception):
            raise output
        return output

    def confirm(self, question):
        self.questions.append(question)
        return self.answer

    def say(self, text):
        self.said.append(text)


def _git_failure(subcommand):
    return subprocess.CalledProcessError(128, ["git", subcommand], stderr="fatal: error")


@pytest.fixture
def make_context():
    return FakeContext


@pytest.fixture
def git_failure():
    return _git_failure


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "GITHUB_ACCESS_TOKEN",
        "GITHUB_USERNAME",
        "GHRELEASE_API_URL",
        "GHRELEASE_TIMEOUT",
        "GHRELEASE_BATCH_SIZE",
        "GHRELEASE_BATCH_DELAY",
    ):
        monkeypatch.delenv(name, raising=False)
