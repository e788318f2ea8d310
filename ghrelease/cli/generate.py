"""Generate command implementation."""

import sys

import click
from pydantic import ValidationError as SettingsError

from ..config import get_settings
from ..context import ClickTaskContext
from ..errors import GHReleaseError
from ..releasenote import ReleaseNotesGenerator


@click.command()
@click.option('--tag', '-t', help='Tag to compare from (defaults to the latest tag)')
@click.option('--yes', '-y', is_flag=True, help='Use the latest tag without asking')
@click.option('--output', '-o', help='Also write the release notes to this file')
@click.pass_context
def generate(ctx, tag, yes, output):
    """Generate release notes from the pull requests merged since a tag."""
    ctx.ensure_object(dict)
    logger = ctx.obj.get('logger')

    try:
        settings = get_settings()
        generator = ReleaseNotesGenerator(ClickTaskContext(assume_yes=yes), settings=settings)
        release_notes = generator.generate(tag)
    except (GHReleaseError, SettingsError) as e:
        if logger:
            logger.debug(f"Release notes generation failed: {e!r}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if release_notes and output:
        try:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(release_notes)
        except OSError as e:
            click.echo(f"Error writing to file {output}: {e}", err=True)
            sys.exit(1)
        click.echo(f"Release notes saved to: {output}")
