# === FILE: site_scraper/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SiteScraper.

Commands:
  run [URL]   Scrape one page (URL given) or every page of the configured sitemap
  config      Show the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format string

run options:
  --output-dir DIR    Root directory for output (overrides output_dir)
  --layout LAYOUT     per-page or combined (overrides layout)
  --report PATH       Save the JSON run report to a file

Also:
  --version, -v       Show the SiteScraper version

Example:
  site-scraper run https://example.com/about --output-dir out
"""
import sys
from pathlib import Path

import click

from site_scraper import __version__
from site_scraper.aggregator import render_json
from site_scraper.config import load_config
from site_scraper.engine import Engine
from site_scraper.errors import InvalidArgumentError, SitemapFetchError
from site_scraper.logger import DEFAULT_FORMAT, init_logging
from site_scraper.utils import validate_url

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteScraper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stdout only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SiteScraper command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Root directory for scraped files'
)
@click.option(
    '--layout', 'layout',
    default=None,
    type=click.Choice(['per-page', 'combined']),
    help='Write per-page files or two combined files'
)
@click.option(
    '--report', '-r', 'report_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON run report to a file'
)
@click.pass_context
def run(ctx, url, output_dir, layout, report_output):
    """Scrape URL, or every page of the configured sitemap when URL is omitted."""
    cfg = ctx.obj['config']
    overrides = {}
    if output_dir is not None:
        overrides['output_dir'] = output_dir
    if layout is not None:
        overrides['layout'] = layout
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    if url is not None:
        try:
            validate_url(url)
        except InvalidArgumentError as e:
            print_error(str(e))
        click.echo(f'Scraping single page: {url}')
    else:
        click.echo(f'Scraping sitemap: {cfg.sitemap_url}')

    try:
        report = Engine(cfg).run(url)
    except SitemapFetchError as e:
        print_error(str(e))
    except Exception as e:
        print_error(f'Scrape failed: {e}')

    if report_output:
        try:
            saved = render_json(report, report_output)
            click.echo(f'JSON report: {saved}')
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')

    summary = report.summary()
    click.echo(
        'Done: {processed} processed, {skipped} skipped, {failed} failed, {files} files written'.format(
            **summary
        )
    )
    if report.aborted:
        click.secho(f'No content extracted from {url}', fg='yellow', err=True)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
