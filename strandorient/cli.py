#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for StrandOrient.

This module provides the main CLI entry point and its subcommands:
orienting a unitig file and managing configuration files.
"""

import sys
import logging
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.parser import ConfigParser, ConfigValidationError
from .config.schema import load_config, save_config_template, validate_config
from .errors import StrandOrientError
from .graph_core.orientation_resolver import CONFLICT_MODES

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str):
    """Send log records to stderr; stdout carries sequence output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    StrandOrient: consistent strand orientation for assembly unitigs.

    Picks, for every unitig, its forward sequence or its reverse complement
    so that unitigs linked by (k-1)-mer overlaps are output on mutually
    consistent strands.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Orientation Command
# ============================================================================

@main.command()
@click.argument('input', type=click.Path(exists=True, dir_okay=False))
@click.argument('k', type=int)
@click.option('--output', '-o', type=click.Path(dir_okay=False),
              help='Output file (default: stdout). A .gz suffix enables gzip.')
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML)')
@click.option('--conflict-mode', type=click.Choice(list(CONFLICT_MODES)), default=None,
              help='How to treat unitigs reached with opposite orientations '
                   '(default from config: report)')
@click.option('--streaming-edges/--eager-edges', default=None,
              help='Derive edges per unitig during traversal instead of up front')
@click.option('--compress/--no-compress', default=None,
              help='gzip the output file (ignored when writing to stdout)')
@click.option('--report', '-r', type=click.Path(dir_okay=False),
              help='Write a JSON run report to this path')
@click.pass_context
def orient(ctx, input, k, output, config, conflict_mode, streaming_edges, compress, report):
    """
    Orient the unitigs in INPUT consistently, using k-mer size K.

    INPUT is a FASTA or FASTQ file (optionally gzipped). Records are written
    in input order and format, each as its original sequence or its
    reverse complement.
    """
    from .utils.pipeline import OrientationPipeline

    try:
        parser = ConfigParser(config)
        parser.merge_cli_overrides({
            'orientation.conflict_mode': conflict_mode,
            'orientation.streaming_edges': streaming_edges,
            'output.compress': compress,
            'output.report': report,
        })
        parser.validate()
    except (ConfigValidationError, OSError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)

    level = parser.get('logging.level', 'INFO')
    if ctx.obj.get('VERBOSE'):
        level = 'DEBUG'
    elif ctx.obj.get('QUIET'):
        level = 'WARNING'
    setup_logging(level)

    try:
        pipeline = OrientationPipeline(k, parser.to_dict())
        result = pipeline.run(input, output=output if output else sys.stdout)
    except (StrandOrientError, OSError, ValueError) as e:
        # Biopython reports malformed records as ValueError
        click.echo(f"❌ Error: {e}", err=True)
        if ctx.obj.get('VERBOSE'):
            import traceback
            traceback.print_exc()
        ctx.exit(1)

    if not ctx.obj.get('QUIET'):
        click.echo(result.summary(), err=True)


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='strandorient_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo(f"  Conflict mode: {config['orientation']['conflict_mode']}")
    click.echo(f"  Streaming edges: {config['orientation']['streaming_edges']}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        for error in errors:
            click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)

    click.echo("\nOrientation:")
    click.echo(f"  Conflict mode: {config['orientation']['conflict_mode']}")
    click.echo(f"  Streaming edges: {config['orientation']['streaming_edges']}")

    click.echo("\nOutput:")
    click.echo(f"  Compress: {config['output']['compress']}")
    click.echo(f"  Report: {config['output']['report'] or 'none'}")

    click.echo("\nLogging:")
    click.echo(f"  Level: {config['logging']['level']}")


if __name__ == '__main__':
    main()
