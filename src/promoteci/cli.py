# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from promoteci import settings
from promoteci.config import load_deployments
from promoteci.errors import (
    AmbiguousPredecessor,
    ConfigError,
    DuplicateJobIdentity,
    PipelineError,
    UnknownEnvironment,
)
from promoteci.pipeline import build_jobs, promotion_levels
from promoteci.render import render_pipeline
from promoteci.ui.console import Console, set_console, get_console


def report_failure(ctx: click.Context, exc: PipelineError) -> None:
    """Print a core/config error the way the user expects and exit 1."""
    console = get_console()

    if isinstance(exc, ConfigError):
        console.print_error(
            "Invalid configuration",
            f"{exc.message}: {exc.path}",
            details=exc.lines or None,
            suggestion="Fix the config file and run the command again.",
        )
    elif isinstance(exc, DuplicateJobIdentity):
        console.print_error(
            "Duplicate job",
            exc.message,
            suggestion="Each instanceName/targetCluster pair may only appear once.",
        )
    elif isinstance(exc, UnknownEnvironment):
        console.print_error(
            "Unknown environment",
            exc.message,
            suggestion="Use one of dev, preprod or prod (or development, pre-production, production).",
        )
    elif isinstance(exc, AmbiguousPredecessor):
        console.print_error(
            "Ambiguous promotion",
            exc.message,
            details=[f"candidate: {c}" for c in exc.candidates],
            suggestion="Keep a single pathToProd deployment per environment, or drop --strict-promotion.",
        )
    else:
        console.print_error(
            "Pipeline generation failed",
            exc.message,
            details=[f"{k}={v}" for k, v in exc.details.items()] or None,
        )

    if ctx.obj.get("debug", False):
        console.print_exception(exc)
    sys.exit(1)


def _load_jobs(config_file: str, strict: bool):
    console = get_console()
    deployments = load_deployments(config_file)
    console.print_debug(f"Loaded configuration with {len(deployments)} deployments")

    jobs = build_jobs(deployments, strict=strict)
    console.print_debug("Generated job names: " + ", ".join(j.id for j in jobs))
    return jobs


config_option = click.option(
    "-c",
    "--config-file",
    default=settings.CONFIG_FILE,
    required=settings.CONFIG_FILE is None,
    type=click.Path(dir_okay=False),
    help="Deployment config file (YAML)",
)
strict_option = click.option(
    "--strict-promotion/--no-strict-promotion",
    default=False,
    show_default=True,
    help="Fail when several pathToProd jobs could gate the same promotion",
)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """promoteci: generate dev → preprod → prod push pipelines."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command()
@config_option
@click.option(
    "-o",
    "--output",
    default=settings.OUTPUT_FILE,
    show_default=True,
    help="File the pipeline is written to",
)
@click.option("--stdout", "to_stdout", is_flag=True, default=False, help="Print the pipeline instead of writing it")
@strict_option
@click.pass_context
def generate(ctx, config_file, output, to_stdout, strict_promotion):
    """Generate the deploy pipeline from a config file."""
    console = get_console()

    try:
        jobs = _load_jobs(config_file, strict_promotion)
        text = render_pipeline(jobs)
    except PipelineError as e:
        report_failure(ctx, e)

    if to_stdout:
        click.echo(text, nl=False)
        return

    try:
        Path(output).write_text(text, encoding="utf-8")
    except OSError as e:
        console.print_error(
            "Could not write pipeline",
            f"Error when writing {output}",
            details=[str(e)],
        )
        sys.exit(1)

    console.print_written(output, len(jobs))


# legacy command name
cli.add_command(generate, name="generate-app-pipeline")


@cli.command()
@config_option
@strict_option
@click.pass_context
def plan(ctx, config_file, strict_promotion):
    """Show jobs and promotion order without writing anything."""
    console = get_console()

    try:
        jobs = _load_jobs(config_file, strict_promotion)
    except PipelineError as e:
        report_failure(ctx, e)

    levels = promotion_levels(jobs)
    console.print_config_loaded(config_file, len(jobs))
    console.print_jobs(jobs)
    console.print_plan(levels)


@cli.command()
@config_option
@strict_option
@click.pass_context
def validate(ctx, config_file, strict_promotion):
    """Check that a config file produces a valid pipeline."""
    console = get_console()

    try:
        jobs = _load_jobs(config_file, strict_promotion)
    except PipelineError as e:
        report_failure(ctx, e)

    console.print_info(f"OK: {config_file} ({len(jobs)} job(s))")


if __name__ == "__main__":
    cli()
