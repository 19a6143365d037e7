#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for AdjWeaver.

This module provides the main CLI entry point and all subcommands for
finding overlaps of exactly k-1 bases between contigs.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .assembly_core.adjacency_engine_module import build_graph_from_files
from .assembly_core.contig_registry import (
    DuplicateContigError,
    GraphStateError,
    SequenceTooShortError,
)
from .assembly_core.kmer_module import KmerError
from .config.parser import ConfigParser, ConfigurationError
from .config.schema import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    load_config,
    save_config_template,
    validate_config,
)
from .io.io_core_module import InputStreamError
from .io_utils.graph_export import export_graph
from .utils.graph_stats import compute_graph_stats, format_graph_stats

PROGRAM = 'adjweaver'

logger = logging.getLogger(__name__)

# Errors that abort a run with a message instead of a traceback
RUN_ERRORS = (
    ConfigurationError,
    DuplicateContigError,
    FileNotFoundError,
    GraphStateError,
    InputStreamError,
    KmerError,
    SequenceTooShortError,
)


def setup_logging(level: str, log_file=None):
    """Send log records to stderr (and optionally a file); stdout carries the graph."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
    logging.getLogger('adjweaver').setLevel(getattr(logging, level))


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    AdjWeaver: contig overlap graph construction

    Find overlaps of exactly k-1 bases between contigs, in both orientations,
    and write the resulting adjacency graph.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='adjweaver_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t', type=click.Choice(['default'] + OUTPUT_FORMATS),
              default='default', help='Configuration template (output format)')
@click.option('--kmer', '-k', 'kmer_size', type=int, default=None,
              help='k-mer size to pre-fill')
def config_init(output, template, kmer_size):
    """Generate a template configuration file."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template, kmer_size=kmer_size)
        click.echo(f"✓ Configuration file created: {output}")
    except (OSError, ValueError) as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        cfg = load_config(Path(config_file))
    except ConfigurationError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(cfg)
    if errors:
        click.echo("✗ Configuration has errors:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        parser = ConfigParser(Path(config_file))
    except ConfigurationError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(parser.to_dict(), default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo(f"  k-mer size:    {parser.get('overlap.kmer_size')}")
    click.echo(f"  Output format: {parser.get('output.format')}")
    click.echo(f"  Output path:   {parser.get('output.path') or '<stdout>'}")
    click.echo(f"  Log level:     {parser.get('output.logging.level')}")
    log_file = parser.get('output.logging.log_file')
    if log_file:
        click.echo(f"  Log file:      {log_file}")

    errors = validate_config(parser.to_dict())
    if errors:
        click.echo(f"\n✗ {len(errors)} problem(s); run `{PROGRAM} config validate` for details",
                   err=True)


# ============================================================================
# Overlap Command
# ============================================================================

@main.command()
@click.option('--kmer', '-k', 'kmer_size', type=int, default=None,
              help='k-mer size; contigs overlapping by exactly k-1 bases are joined')
@click.option('--format', '-f', 'fmt', type=click.Choice(OUTPUT_FORMATS), default=None,
              help='Output format (default: adj)')
@click.option('--output', '-o', type=click.Path(), default=None,
              help='Output graph file (default: standard output)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), default=None,
              help='YAML configuration file')
@click.option('--log-file', type=click.Path(), default=None,
              help='Also write log messages to this file')
@click.argument('files', nargs=-1, type=click.Path(allow_dash=True))
@click.pass_context
def overlap(ctx, kmer_size, fmt, output, config_file, log_file, files):
    """
    Find overlaps of exactly k-1 bases between contigs.

    Contigs are read from FILES (FASTA or FASTQ, optionally gzipped) or
    standard input. The graph is written to standard output unless -o is given.
    """
    overrides = {
        'overlap.kmer_size': kmer_size,
        'output.format': fmt,
        'output.path': output,
        'output.logging.log_file': log_file,
    }
    if ctx.obj.get('VERBOSE'):
        overrides['output.logging.level'] = 'INFO'
    elif ctx.obj.get('QUIET'):
        overrides['output.logging.level'] = 'ERROR'

    try:
        parser = ConfigParser(config_file)
        parser.merge_cli_overrides(overrides)
    except ConfigurationError as e:
        click.echo(f"{PROGRAM}: {e}", err=True)
        ctx.exit(1)

    errors = validate_config(parser.to_dict())
    if errors:
        for error in errors:
            click.echo(f"{PROGRAM}: {error}", err=True)
        click.echo(f"Try `{PROGRAM} overlap --help' for more information.", err=True)
        ctx.exit(1)

    setup_logging(parser.get('output.logging.level'), parser.get('output.logging.log_file'))

    k = parser.get('overlap.kmer_size')
    try:
        graph = build_graph_from_files(files, k)
    except RUN_ERRORS as e:
        click.echo(f"{PROGRAM}: {e}", err=True)
        ctx.exit(1)

    if logger.isEnabledFor(logging.INFO):
        logger.info(format_graph_stats(compute_graph_stats(graph)))

    command_line = ' '.join([PROGRAM] + sys.argv[1:])
    try:
        export_graph(graph, parser.get('output.path'), parser.get('output.format'),
                     program=PROGRAM, command_line=command_line)
    except OSError as e:
        click.echo(f"{PROGRAM}: cannot write graph: {e}", err=True)
        ctx.exit(1)


# ============================================================================
# Utility Commands
# ============================================================================

@main.command()
def info():
    """Show version and dependency information."""
    click.echo(f"AdjWeaver v{__version__}")
    click.echo("\nDependencies:")

    import Bio
    import numpy
    click.echo(f"  BioPython: {Bio.__version__}")
    click.echo(f"  NumPy: {numpy.__version__}")
    click.echo(f"  PyYAML: {yaml.__version__}")
    click.echo(f"  Click: {_click_version()}")
    click.echo(f"\nLog levels: {', '.join(LOG_LEVELS)}")
    click.echo(f"Output formats: {', '.join(OUTPUT_FORMATS)}")


def _click_version() -> str:
    from importlib.metadata import version, PackageNotFoundError
    try:
        return version('click')
    except PackageNotFoundError:
        return 'unknown'


if __name__ == '__main__':
    sys.exit(main())
