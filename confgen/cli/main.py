"""
Main CLI entry point for confgen.
"""

import sys
from pathlib import Path

import click

from confgen import __version__
from confgen.config.paths import BUILD_TAGS_ENV, OUTPUT_FILE

header_argument = click.argument(
    "header",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Build configuration module generator."""
    pass


@cli.command()
@header_argument
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=OUTPUT_FILE,
    show_default=True,
    help="Where to write the generated module.",
)
@click.option(
    "--build-tags",
    envvar=BUILD_TAGS_ENV,
    default=None,
    help=f"Build tags to embed as {BUILD_TAGS_ENV}.",
)
def generate(header, output, build_tags):
    """Generate the configuration module from a config header."""
    from confgen.pipeline.runner import run_generate

    run_generate(header, output, build_tags)


@cli.command()
@header_argument
def inspect(header):
    """Show how each header entry will be declared."""
    from confgen.core.declarations import classify, right_hand_side
    from confgen.pipeline.runner import load_config
    from confgen.utils.logging import logger

    try:
        config = load_config(header)
    except (ValueError, OSError) as e:
        logger.error(f"inspect failed: {e}")
        sys.exit(1)

    click.echo(f"PREFIX {config.prefix}")
    for entry in config.entries:
        kind = classify(entry)
        click.echo(f"{entry.name:<32} {kind.value:<12} {right_hand_side(entry, kind)}")


if __name__ == "__main__":
    cli()
