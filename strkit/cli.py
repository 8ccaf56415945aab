"""
Command line access to the strkit transformations.
Text is taken from the TEXT argument, from --input FILE, or from stdin.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .casing import convert_case
from .codec import decode, encode
from .config import (
    ConfigError,
    StrkitConfig,
    apply_overrides,
    build_config,
    normalize_config,
    validate_config,
)
from .counting import count_substr
from .entities import html_decode, html_encode
from .exceptions import InvalidArgumentError, StrkitError
from .filesystem import get_max_input_size, normalize_filepath, read_input
from .models import CODEC_SPECS, CaseStyle
from .slugify import slugify, transliterate
from .truncate import safe_truncate, truncate

__all__ = ["cli"]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

input_option = click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Read the text from a UTF-8 file instead of the argument.",
)
text_argument = click.argument("text", required=False)


@click.group()
@click.version_option(package_name="strkit")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool = False):
    """
    Entry point for the strkit string transformation commands.

    Loads defaults from the nearest ``[tool.strkit]`` table in
    ``pyproject.toml`` or ``.strkit.toml`` before running the subcommand.

    Raises:
        click.ClickException: If the configuration file is invalid.

    Examples:
        strkit slugify "Hello World & Friends"
        strkit --verbose encode --codec binary "Hi"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    try:
        ctx.obj = build_config(Path.cwd())
    except ConfigError as error:
        raise click.ClickException(str(error)) from error


def _configure(ctx: click.Context, **overrides: object) -> StrkitConfig:
    try:
        config = normalize_config(apply_overrides(ctx.obj or StrkitConfig(), **overrides))
        validate_config(config)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error
    return config


def _resolve_text(config: StrkitConfig, text: str | None, input_path: str | None) -> str:
    if text is not None and input_path is not None:
        raise click.UsageError("Pass either TEXT or --input, not both.")
    if text is not None:
        return text

    if input_path is None:
        logger.debug("Reading text from stdin")
        return click.get_text_stream("stdin").read().removesuffix("\n")

    try:
        filepath = normalize_filepath(input_path)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error
    try:
        max_size = get_max_input_size(default=config.max_input_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    try:
        return read_input(filepath, max_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error


def _run(transform, *args, **kwargs):
    try:
        return transform(*args, **kwargs)
    except InvalidArgumentError as error:
        raise click.BadParameter(str(error)) from error
    except StrkitError as error:
        raise click.ClickException(str(error)) from error


@cli.command("slugify")
@text_argument
@input_option
@click.option("--fallback", help="Output used when the slug is empty.")
@click.pass_context
def slugify_command(ctx, text, input_path, fallback):
    """Convert TEXT to a URL slug."""
    config = _configure(ctx, slug_fallback=fallback)
    value = _resolve_text(config, text, input_path)
    click.echo(_run(slugify, value, fallback=config.slug_fallback))


@cli.command("transliterate")
@text_argument
@input_option
@click.pass_context
def transliterate_command(ctx, text, input_path):
    """Replace accented and non-Latin characters in TEXT with ASCII."""
    config = _configure(ctx)
    click.echo(_run(transliterate, _resolve_text(config, text, input_path)))


@cli.command("case")
@text_argument
@input_option
@click.option(
    "--style",
    type=click.Choice([style.value for style in CaseStyle] + ["pascal"]),
    help="Target case style.",
)
@click.pass_context
def case_command(ctx, text, input_path, style):
    """Convert TEXT to camel, studly, kebab, or snake case."""
    config = _configure(ctx, case_style=style)
    value = _resolve_text(config, text, input_path)
    click.echo(_run(convert_case, value, config.case_style))


@cli.command("count")
@click.argument("needle")
@text_argument
@input_option
@click.option(
    "--case-sensitive/--ignore-case", default=None, help="Match case (default from config)."
)
@click.option(
    "--overlap/--no-overlap", default=None, help="Count overlapping matches."
)
@click.pass_context
def count_command(ctx, needle, text, input_path, case_sensitive, overlap):
    """Count occurrences of NEEDLE in TEXT."""
    config = _configure(ctx, case_sensitive=case_sensitive, allow_overlapping=overlap)
    value = _resolve_text(config, text, input_path)
    count = _run(
        count_substr,
        value,
        needle,
        case_sensitive=config.case_sensitive,
        allow_overlapping=config.allow_overlapping,
    )
    click.echo(count)


codec_option = click.option(
    "--codec",
    type=click.Choice(list(CODEC_SPECS) + ["bin", "dec"]),
    help="Named codec (default from config).",
)


@cli.command("encode")
@text_argument
@input_option
@codec_option
@click.option("--strict/--lenient", default=None, help="Reject characters that do not fit.")
@click.pass_context
def encode_command(ctx, text, input_path, codec, strict):
    """Encode TEXT as fixed-width binary, hex, or decimal digit groups."""
    config = _configure(ctx, codec=codec, strict_codec=strict)
    spec = CODEC_SPECS[config.codec]
    value = _resolve_text(config, text, input_path)
    click.echo(_run(encode, value, spec.digits, spec.radix, strict=config.strict_codec))


@cli.command("decode")
@text_argument
@input_option
@codec_option
@click.pass_context
def decode_command(ctx, text, input_path, codec):
    """Decode digit groups produced by `strkit encode`."""
    config = _configure(ctx, codec=codec)
    spec = CODEC_SPECS[config.codec]
    value = _resolve_text(config, text, input_path).strip()
    click.echo(_run(decode, value, spec.digits, spec.radix))


@cli.command("truncate")
@text_argument
@input_option
@click.option("--length", "-n", type=int, required=True, help="Maximum length.")
@click.option("--filler", help="Text appended to truncated output.")
@click.option("--unsafe", is_flag=True, help="Cut at the exact length, even mid-word.")
@click.pass_context
def truncate_command(ctx, text, input_path, length, filler, unsafe):
    """Shorten TEXT to at most --length characters."""
    config = _configure(ctx, filler=filler)
    value = _resolve_text(config, text, input_path)
    transform = truncate if unsafe else safe_truncate
    click.echo(_run(transform, value, length, config.filler))


@cli.command("html-encode")
@text_argument
@input_option
@click.pass_context
def html_encode_command(ctx, text, input_path):
    """Replace characters in TEXT with named HTML entities."""
    config = _configure(ctx)
    click.echo(_run(html_encode, _resolve_text(config, text, input_path)))


@cli.command("html-decode")
@text_argument
@input_option
@click.pass_context
def html_decode_command(ctx, text, input_path):
    """Replace HTML character references in TEXT."""
    config = _configure(ctx)
    click.echo(_run(html_decode, _resolve_text(config, text, input_path)))


if __name__ == "__main__":
    cli()
