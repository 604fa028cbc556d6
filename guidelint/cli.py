"""
cli.py — Command-line interface for guidelint.

Usage:
    guidelint check
    guidelint check src/ tests/ --select N,D --ignore D003
    guidelint check --format json --exit-zero
    guidelint rules

Exit status: 0 when no violations were found (or --exit-zero), 1 when there
were violations, 2 for configuration errors and missing paths.
"""

import logging
import os
import sys

import click

from guidelint import __version__
from guidelint.checks import all_rules
from guidelint.config import ENV_PREFIX, load_config, load_env_file
from guidelint.errors import GuidelintError
from guidelint.reporters import format_report, format_rules
from guidelint.runner import lint_paths

logger = logging.getLogger(__name__)

EXIT_OK         = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR      = 2


def _configure_logging(verbose: bool):
    load_env_file()
    level = 'DEBUG' if verbose else os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(message)s',
        stream=sys.stderr,
    )


@click.group()
@click.version_option(__version__, prog_name='guidelint')
def cli():
    """Check Python sources and requirements files against the style guide."""


@cli.command('check')
@click.argument('paths', nargs=-1, type=click.Path())
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='pyproject.toml to read [tool.guidelint] from')
@click.option('--select',          default=None, help='Comma-separated code prefixes to report')
@click.option('--ignore',          default=None, help='Comma-separated code prefixes to skip')
@click.option('--max-line-length', type=int, default=None, help='Longest allowed line')
@click.option('--quote-style',     type=click.Choice(['single', 'double']), default=None,
              help='Preferred string quote')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default=None,
              help='Report format')
@click.option('--statistics',      is_flag=True, help='Show a count per rule code')
@click.option('--exit-zero',       is_flag=True, help='Exit 0 even when violations are found')
@click.option('-v', '--verbose',   is_flag=True, help='Debug logging on stderr')
def check(paths, config_path, select, ignore, max_line_length, quote_style,
          output_format, statistics, exit_zero, verbose):
    """Lint PATHS (files or directories; default: current directory)."""
    _configure_logging(verbose)
    paths = list(paths) or ['.']

    overrides = {
        'select':          select,
        'ignore':          ignore,
        'max_line_length': max_line_length,
        'quote_style':     quote_style,
        'output_format':   output_format,
    }
    try:
        config = load_config(config_path=config_path, overrides=overrides)
        report = lint_paths(paths, config)
    except GuidelintError as exc:
        click.echo(f'✗ {exc.message}', err=True)
        sys.exit(EXIT_ERROR)

    click.echo(format_report(report, config.output_format, statistics=statistics))

    if report.violations and not exit_zero:
        sys.exit(EXIT_VIOLATIONS)
    sys.exit(EXIT_OK)


@cli.command('rules')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text',
              show_default=True, help='Catalogue format')
def rules(output_format):
    """List every rule guidelint can report."""
    click.echo(format_rules(all_rules(), output_format))


def main():
    cli(prog_name='guidelint')


if __name__ == '__main__':
    main()
