"""
CLI interface for outcomes.

Inspects and exercises outcome catalogs (outcomes.yaml): list the declared
sets, validate the file, and simulate a dispatch against a set.
"""

import sys
from pathlib import Path

import click
from rich.table import Table

from outcomes import __version__
from outcomes.config import LOG_LEVELS, load_catalog
from outcomes.dispatcher import Dispatcher
from outcomes.errors import ConfigError, OutcomeError


def _catalog(ctx):
    """Return the loaded catalog or exit with the load error."""
    if "catalog" not in ctx.obj:
        click.echo(f"✗ Catalog not loaded: {ctx.obj.get('catalog_error', 'Unknown error')}", err=True)
        raise SystemExit(1)
    return ctx.obj["catalog"]


@click.group()
@click.version_option(version=__version__, prog_name="outcomes")
@click.option("--catalog", "catalog_path", type=click.Path(path_type=Path), default=None,
              help="Path to outcomes.yaml (default: $OUTCOMES_CATALOG or ./outcomes.yaml)")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Override catalog log level")
@click.pass_context
def main(ctx, catalog_path, log_level):
    """
    outcomes - Named outcome dispatch.

    Inspect outcome catalogs and simulate dispatches.
    """
    from outcomes.utils import setup_logging

    ctx.ensure_object(dict)
    try:
        catalog = load_catalog(catalog_path)
        catalog_level = catalog.get_log_level()
    except ConfigError as e:
        # `check` reports this itself; other commands fail in _catalog
        ctx.obj["catalog_error"] = str(e)
        setup_logging(log_level or "WARNING")
        return

    ctx.obj["catalog"] = catalog
    setup_logging(log_level or catalog_level, catalog.get_log_format(), catalog.get_log_file_path())


@main.command("sets")
@click.pass_context
def list_sets(ctx):
    """List outcome sets in the catalog."""
    from outcomes.utils import console

    catalog = _catalog(ctx)

    table = Table(title=f"{catalog.name} v{catalog.version}")
    table.add_column("Set")
    table.add_column("Outcomes")
    for set_name in catalog.set_names():
        table.add_row(set_name, ", ".join(str(n) for n in catalog.get(set_name)))
    console.print(table)


@main.command()
@click.argument("set_name")
@click.pass_context
def names(ctx, set_name):
    """Print the outcome names of SET_NAME, one per line."""
    catalog = _catalog(ctx)
    try:
        name_set = catalog.get(set_name)
    except ConfigError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1)

    for name in name_set:
        click.echo(name)


@main.command()
@click.pass_context
def check(ctx):
    """Validate the catalog file."""
    if "catalog" not in ctx.obj:
        click.echo(f"✗ {ctx.obj.get('catalog_error')}", err=True)
        raise SystemExit(1)

    catalog = ctx.obj["catalog"]
    click.echo(f"✓ {catalog.name}: {len(catalog.sets)} outcome set(s)")


@main.command()
@click.argument("set_name")
@click.argument("outcome")
@click.argument("args", nargs=-1)
@click.pass_context
def simulate(ctx, set_name, outcome, args):
    """
    Dispatch OUTCOME with ARGS against SET_NAME.

    The handler probes every declared outcome and prints the one that fired.
    """
    catalog = _catalog(ctx)

    def report(resolution):
        fired = []
        for name in resolution.names:
            resolution.probe(name, lambda *a, _name=name: fired.append((_name, a)))
        return fired

    try:
        dispatcher = Dispatcher(catalog.get(set_name), handler=report)
        fired = dispatcher.dispatch(outcome, *args)
    except OutcomeError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1)

    for name, fired_args in fired:
        click.echo(f"{name}({', '.join(fired_args)})")


if __name__ == "__main__":
    sys.exit(main())
