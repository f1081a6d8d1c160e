"""
Main CLI entry point for genkit-migrate.

This module provides the command-line interface using Click with Rich
formatting. It is the only layer that turns pipeline errors into a
process exit.
"""

import platform
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from genkit_migrate import __version__
from genkit_migrate.analyzer.project import ProjectAnalyzer
from genkit_migrate.cli.config_persistence import ConfigurationPersistence
from genkit_migrate.core.exceptions import GenkitMigrateError
from genkit_migrate.generator.writer import ProjectGenerator
from genkit_migrate.models.config import (
    AnalyzerConfig,
    GeneratorConfig,
    ToolConfig,
    TransformerConfig,
)
from genkit_migrate.reporters import get_reporter
from genkit_migrate.reporters.table import TableReportGenerator
from genkit_migrate.transformer.planner import ProjectTransformer
from genkit_migrate.utils.logging import setup_logging

# Status output; reports go to stdout
console = Console(stderr=True, soft_wrap=True)


def info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def fail(message: str) -> None:
    """Print a one-line error and exit with status 1."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}")
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True,
              help='Verbose output; unparsable files are skipped with a warning')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              envvar='GENKIT_MIGRATE_CONFIG',
              help='Config file (default is ~/.genkit-migrate.yaml)')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write logs to this file')
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool, config_path: Optional[str],
         log_file: Optional[str]):
    """
    Migrate Genkit applications between cloud providers.
    
    Analyzes an existing Genkit project, transforms its code and
    configuration, and generates deployment artifacts for the target
    cloud platform.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['config_path'] = config_path
    
    setup_logging(level="DEBUG" if verbose else "WARNING", log_file=log_file)
    
    if version:
        click.echo(f"genkit-migrate version {__version__}")
        sys.exit(0)
    
    try:
        ctx.obj['config'] = ConfigurationPersistence(config_path).load()
    except GenkitMigrateError as e:
        fail(e.message)
    
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option('--source', '-s', default='.', show_default=True,
              type=click.Path(exists=True, file_okay=False), help='Source project path')
@click.option('--from', 'from_provider', default='auto-detect', show_default=True,
              help='Provider tag recorded for the project')
@click.option('--format', 'output_format', default='table', show_default=True,
              help='Output format (table, json, yaml)')
@click.option('--output', '-o', type=click.Path(dir_okay=False),
              help='Output file (default: stdout)')
@click.pass_context
def analyze(ctx: click.Context, source: str, from_provider: str,
            output_format: str, output: Optional[str]):
    """Analyze a Genkit project without migrating it."""
    verbose = ctx.obj.get('verbose', False)
    
    try:
        reporter = get_reporter(output_format)
        
        source_abs = Path(source).absolute()
        info(f"Analyzing Genkit project: {source_abs}")
        
        analyzer = ProjectAnalyzer(AnalyzerConfig(
            source_provider=from_provider,
            target_provider="",
            verbose=verbose,
        ))
        project = analyzer.analyze_project(source_abs)
        success("Analysis complete")
        
        content = reporter.render_project(project)
        if output:
            saved = reporter.save(content, output)
            success(f"Analysis written to {saved}")
        else:
            click.echo(content)
    except GenkitMigrateError as e:
        fail(f"analysis failed: {e.message}")


@main.command()
@click.option('--source', '-s', default='.', show_default=True,
              type=click.Path(exists=True, file_okay=False), help='Source project path')
@click.option('--target', '-t', type=click.Path(file_okay=False),
              help='Target project path (default: <source>_<to>)')
@click.option('--from', 'from_provider', help='Source cloud provider (gcp, aws, azure)')
@click.option('--to', 'to_provider', help='Target cloud provider (aws, gcp, azure)')
@click.option('--dry-run', is_flag=True, help='Analyze and plan without writing files')
@click.option('--interactive/--non-interactive', default=None,
              help='Confirm before writing the migrated project')
@click.option('--overwrite', is_flag=True, help='Replace an existing target directory')
@click.pass_context
def migrate(ctx: click.Context, source: str, target: Optional[str],
            from_provider: Optional[str], to_provider: Optional[str],
            dry_run: bool, interactive: Optional[bool], overwrite: bool):
    """Migrate a Genkit project between cloud providers."""
    verbose = ctx.obj.get('verbose', False)
    tool_config: ToolConfig = ctx.obj.get('config') or ToolConfig()
    
    from_provider = (from_provider or tool_config.default_source_provider).lower()
    to_provider = (to_provider or tool_config.default_target_provider).lower()
    if interactive is None:
        interactive = tool_config.interactive
    
    source_abs = Path(source).absolute()
    target_abs = Path(target).absolute() if target else Path(f"{source_abs}_{to_provider}")
    
    info("Starting Genkit migration")
    info(f"Source: {source_abs} ({from_provider})")
    info(f"Target: {target_abs} ({to_provider})")
    
    try:
        analyzer = ProjectAnalyzer(AnalyzerConfig(
            source_provider=from_provider,
            target_provider=to_provider,
            verbose=verbose,
        ))
        project = analyzer.analyze_project(source_abs)
        success(f"Found {len(project.flows)} flows, {len(project.models)} models")
        
        if interactive and not dry_run:
            if not Confirm.ask("Continue with migration?", console=console):
                info("Migration cancelled")
                return
        
        transformer = ProjectTransformer(TransformerConfig(
            source_provider=from_provider,
            target_provider=to_provider,
            target_path=str(target_abs),
            dry_run=dry_run,
            region=tool_config.aws_settings().region,
        ))
        migration = transformer.transform_project(project)
        success("Project transformation complete")
        
        if dry_run:
            info("Dry run complete - no files were written")
            click.echo(TableReportGenerator().render_migration(migration))
            return
        
        generator = ProjectGenerator(GeneratorConfig(
            target_provider=to_provider,
            output_path=str(target_abs),
            overwrite=overwrite,
        ))
        generator.generate_project(migration)
        success(f"Migration complete! Check {target_abs}")
    except GenkitMigrateError as e:
        fail(f"migration failed: {e.message}")


@main.command()
def version():
    """Print version information."""
    click.echo(f"genkit-migrate {__version__}")
    click.echo(f"Python version: {platform.python_version()}")
    click.echo(f"OS/Arch: {platform.system().lower()}/{platform.machine()}")


@main.group()
def config():
    """Manage the tool configuration file."""
    pass


@config.command('show')
@click.pass_context
def config_show(ctx: click.Context):
    """Print the effective configuration."""
    tool_config: ToolConfig = ctx.obj.get('config') or ToolConfig()
    click.echo(_dump_config(tool_config), nl=False)


@config.command('init')
@click.option('--force', is_flag=True, help='Overwrite an existing file')
@click.pass_context
def config_init(ctx: click.Context, force: bool):
    """Write a configuration file with default settings."""
    persistence = ConfigurationPersistence(ctx.obj.get('config_path'))
    if persistence.config_path.exists() and not force:
        fail(f"configuration file already exists: {persistence.config_path}")
    
    try:
        saved = persistence.save(ToolConfig())
    except GenkitMigrateError as e:
        fail(e.message)
    success(f"Configuration saved to {saved}")


def _dump_config(tool_config: ToolConfig) -> str:
    return yaml.safe_dump(
        tool_config.model_dump(mode="json", exclude_none=True),
        default_flow_style=False,
        sort_keys=False
    )


if __name__ == "__main__":
    main()
