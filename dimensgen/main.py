"""
dimensgen — CLI entrypoint.

Usage:
    dimensgen                 # same as "dimensgen generate"
    dimensgen generate
    dimensgen buckets --json
    python -m dimensgen
"""

from __future__ import annotations

import json
import sys

import click

from dimensgen import __version__
from dimensgen.core.observability.logging_config import configure_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dimensgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """dimensgen — generate values-sw<N>dp/dimens.xml into ./output."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    configure_logging(debug=debug, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@cli.command()
@click.pass_context
def generate(ctx: click.Context) -> None:
    """Generate one dimens.xml per bucket into ./output.

    Failures are reported per bucket; the exit status is 0 regardless.
    """
    from dimensgen.core.config.settings import ConfigError
    from dimensgen.core.use_cases.generate import run

    try:
        result = run()
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)

    if not quiet:
        for bucket in result.buckets:
            if bucket.written:
                click.secho(f"✓ makeDimens {bucket.width} success → {bucket.file}", fg="green")

    failed = result.failed
    if failed:
        click.secho(
            f"⚠️  {len(failed)}/{len(result.buckets)} bucket(s) failed: "
            + ", ".join(f"{b.width}dp" for b in failed),
            fg="yellow",
            err=True,
        )
    elif not quiet:
        click.echo(
            f"\n📐 {len(result.buckets)} buckets scaled against "
            f"{result.baseline}dp in {result.output_root}/"
        )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def buckets(as_json: bool) -> None:
    """List the compiled-in buckets and their scale factors."""
    from dimensgen.core.config.settings import ConfigError
    from dimensgen.core.use_cases.buckets import list_buckets

    try:
        table = list_buckets()
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(table, indent=2))
        return

    baseline = table["baseline"]
    click.secho(f"\n📐 Baseline: {baseline['name']} ({baseline['width']}dp)", fg="cyan", bold=True)
    for b in table["buckets"]:
        marker = "  ← baseline" if b["baseline"] else ""
        click.echo(f"   • {b['qualifier']:<18} ×{b['scale']:.4f}{marker}")
    click.echo()


def main() -> None:
    """Entry point for ``python -m dimensgen``."""
    cli()


if __name__ == "__main__":
    main()
