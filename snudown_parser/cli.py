"""
Parses a Snudown HTML file and prints its document structure.
Prints a plain-text outline by default, or JSON with ``--format json``.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from .config import ConfigError, apply_overrides, build_config, get_max_file_size
from .logger import enable_debug_logging
from .outline import render_outline
from .parser import ParseFileError, parse_file
from .serialize import result_to_dict

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="snudown-parser")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["outline", "json"]),
    default="outline",
    show_default=True,
    help="Output format",
)
@click.option("--default-link", help="Link target for anchors without an href")
@click.option(
    "--plain-quotes",
    is_flag=True,
    help='Expect plain "value" attribute quoting instead of escaped \\"value\\"',
)
@click.option("--verbose", is_flag=True, help="Log scanning details to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def cli(
    filepath: Path,
    output_format: str = "outline",
    default_link: str | None = None,
    plain_quotes: bool = False,
    verbose: bool = False,
):
    """
    Entry point for inspecting a Snudown HTML file.

    Args:
        filepath: Path to the file to parse.
        output_format: ``outline`` or ``json``.
        default_link: Override for the placeholder href.
        plain_quotes: Use plain attribute quoting.
        verbose: Enable debug logging.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If the file cannot be read or parsed.

    Examples:
        snudown-parse comment.html --format json
    """
    if verbose:
        enable_debug_logging()

    try:
        config = build_config(
            filepath.parent,
            default_link=default_link,
            escaped_quotes=False if plain_quotes else None,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ConfigError as error:
        raise click.ClickException(str(error)) from error

    try:
        result = parse_file(filepath, apply_overrides(config, max_file_size=max_file_size))
    except (ParseFileError, ConfigError) as error:
        raise click.ClickException(str(error)) from error

    if output_format == "json":
        click.echo(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        click.echo("".join(render_outline(result, config)), nl=False)


if __name__ == "__main__":
    cli()
