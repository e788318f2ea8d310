"""Tests for the command line interface."""

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

import ghrelease.cli.generate as generate_module
from ghrelease import __version__
from ghrelease.cli.main import cli
from ghrelease.errors import ConfigurationError


@pytest.fixture
def generator(monkeypatch):
    instance = MagicMock()
    generator_cls = MagicMock(return_value=instance)
    monkeypatch.setattr(generate_module, "ReleaseNotesGenerator", generator_cls)
    return generator_cls, instance


class TestGenerateCommand:

    def test_passes_tag(self, generator):
        generator_cls, instance = generator
        instance.generate.return_value = "notes\n"

        result = CliRunner().invoke(cli, ["generate", "--tag", "v1.0.0"])

        assert result.exit_code == 0
        instance.generate.assert_called_once_with("v1.0.0")

    def test_yes_flag_skips_prompt(self, generator):
        generator_cls, instance = generator
        instance.generate.return_value = None

        CliRunner().invoke(cli, ["generate", "--yes"])

        context = generator_cls.call_args[0][0]
        assert context.confirm("Compare from the latest tag: v1?") is True

    def test_error_exits_non_zero(self, generator):
        _, instance = generator
        instance.generate.side_effect = ConfigurationError("GitHub credentials required.")

        result = CliRunner().invoke(cli, ["generate"])

        assert result.exit_code == 1
        assert "Error: GitHub credentials required." in result.output

    def test_writes_output_file(self, generator, tmp_path):
        _, instance = generator
        instance.generate.return_value = "## Changelog\n"
        target = tmp_path / "notes.md"

        result = CliRunner().invoke(cli, ["generate", "-t", "v1", "-o", str(target)])

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == "## Changelog\n"
        assert f"Release notes saved to: {target}" in result.output

    def test_no_output_file_without_notes(self, generator, tmp_path):
        _, instance = generator
        instance.generate.return_value = None
        target = tmp_path / "notes.md"

        result = CliRunner().invoke(cli, ["generate", "-o", str(target)])

        assert result.exit_code == 0
        assert not target.exists()


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
