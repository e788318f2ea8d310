"""Main CLI entry point for ghrelease."""

import logging

import click

from .. import __version__
from .generate import generate


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__, prog_name="ghrelease")
@click.pass_context
def cli(ctx, debug):
    """ghrelease - release notes from GitHub pull requests and issues."""

    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    ctx.ensure_object(dict)
    ctx.obj['logger'] = logging.getLogger('ghrelease')


cli.add_command(generate)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
