"""Tests for the click-backed task context."""

import subprocess
from unittest.mock import MagicMock

import pytest

import ghrelease.context as context_module
from ghrelease.context import ClickTaskContext
from ghrelease.errors import GitError
from ghrelease.git import GitRepository


class TestClickTaskContext:

    def test_run_returns_stdout(self, monkeypatch):
        run = MagicMock(return_value=subprocess.CompletedProcess(
            ["git", "tag"], 0, stdout="v1.0.0\nv1.1.0\n", stderr="",
        ))
        monkeypatch.setattr(context_module.subprocess, "run", run)

        assert ClickTaskContext().run(["git", "tag"]) == "v1.0.0\nv1.1.0\n"
        args, kwargs = run.call_args
        assert args[0] == ["git", "tag"]
        assert kwargs["check"] is True
        assert kwargs["capture_output"] is True

    def test_failed_command_becomes_git_error(self, monkeypatch):
        run = MagicMock(side_effect=subprocess.CalledProcessError(
            128, ["git", "fetch"], stderr="fatal: unable to access remote",
        ))
        monkeypatch.setattr(context_module.subprocess, "run", run)

        with pytest.raises(GitError, match="fatal: unable to access remote"):
            GitRepository(ClickTaskContext()).fetch()

    def test_assume_yes_skips_prompt(self, monkeypatch):
        confirm = MagicMock()
        monkeypatch.setattr(context_module.click, "confirm", confirm)

        assert ClickTaskContext(assume_yes=True).confirm("Proceed?") is True
        confirm.assert_not_called()

    def test_say_echoes(self, capsys):
        ClickTaskContext().say("No tags found.")
        assert capsys.readouterr().out == "No tags found.\n"
