"""Command-line interface for the YAML Transcoder."""

import logging
import sys
import click
from pathlib import Path
from typing import Optional, TextIO
from . import __version__
from .transcoder import JsonYamlTranscoder
from .types import Direction


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


def _run(input_file: TextIO, output: Optional[Path], direction: Direction, verbose: bool,
         **options) -> None:
    """Convert INPUT_FILE and write the result to OUTPUT or stdout."""
    _configure_logging(verbose)

    try:
        transcoder = JsonYamlTranscoder(enable_profiling=verbose, **options)
    except ValueError as e:
        raise click.BadParameter(str(e))

    result = transcoder.convert(input_file.read(), direction)

    if not result.success:
        click.echo(f"❌ {direction.value} conversion failed: {result.error_message}", err=True)
        sys.exit(1)

    if verbose:
        for warning in result.warnings:
            click.echo(f"⚠️  {warning}", err=True)

    if output:
        output.write_text(result.output + "\n" if result.output else "", encoding="utf-8")
        click.echo(f"✅ Wrote {direction.value} output to {output}", err=True)
    else:
        click.echo(result.output)

    if verbose and transcoder.profiler:
        click.echo(transcoder.profiler.export_metrics("summary"), err=True)


@click.group()
@click.version_option(version=__version__)
def main():
    """YAML Transcoder - Convert between JSON and block-style YAML."""
    pass


@main.command("to-yaml")
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output YAML file path (default: stdout)')
@click.option('--indent', '-i', default=2, show_default=True, help='Spaces per nesting level (1-8)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def to_yaml(input_file: TextIO, output: Optional[Path], indent: int, verbose: bool):
    """Convert a JSON document to YAML."""
    _run(input_file, output, Direction.JSON_TO_YAML, verbose, indent_width=indent)


@main.command("to-json")
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file path (default: stdout)')
@click.option('--json-indent', default=2, show_default=True, help='JSON indentation (0 for compact)')
@click.option('--strict', is_flag=True, help='Fail on lines the parser cannot place')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def to_json(input_file: TextIO, output: Optional[Path], json_indent: int, strict: bool, verbose: bool):
    """Convert a YAML document to JSON."""
    _run(input_file, output, Direction.YAML_TO_JSON, verbose, json_indent=json_indent, strict=strict)


@main.command("format")
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output YAML file path (default: stdout)')
@click.option('--indent', '-i', default=2, show_default=True, help='Spaces per nesting level (1-8)')
@click.option('--strict', is_flag=True, help='Fail on lines the parser cannot place')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def format_yaml(input_file: TextIO, output: Optional[Path], indent: int, strict: bool, verbose: bool):
    """Reformat a YAML document with uniform indentation."""
    _run(input_file, output, Direction.YAML_TO_YAML, verbose, indent_width=indent, strict=strict)


if __name__ == '__main__':
    main()
