"""Typer CLI for tenantconf."""

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from pydantic import ValidationError

from tenantconf.common.exceptions import TenantConfError

app = typer.Typer(name="tenantconf", help="tenantconf: plan entitlement and theme resolution")
console = Console()


def _read_json(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] cannot read {escape(str(path))}: {escape(str(e))}")
        raise typer.Exit(1)


def _fail(e: Exception) -> NoReturn:
    if isinstance(e, TenantConfError):
        console.print(f"[bold red]{e.code}[/bold red]: {escape(e.message)}")
    else:
        console.print(f"[bold red]INVALID_INPUT[/bold red]: {escape(str(e))}")
    raise typer.Exit(1)


def _plan_table(table_path: Optional[Path]):
    from tenantconf.entitlements.table import load_plan_table
    from tenantconf.deps import get_plan_table

    return load_plan_table(table_path) if table_path else get_plan_table()


def _format_limit(value) -> str:
    return "∞" if value == "unbounded" else f"{value:,}"


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", help="Log level for JSON logs on stderr"),
):
    """Plan entitlement and theme resolution."""
    from tenantconf.common.logging import setup_logging

    setup_logging(log_level)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind host"),
    port: int = typer.Option(8080, help="Bind port"),
):
    """Start the tenantconf API server."""
    import uvicorn
    from tenantconf.app import create_app

    console.print(f"[bold green]Starting tenantconf on {host}:{port}[/bold green]")
    uvicorn.run(create_app(), host=host, port=port)


@app.command()
def plans(
    table_path: Optional[Path] = typer.Option(None, "--table", help="Plan table JSON file"),
):
    """Show the plan matrix."""
    try:
        table = _plan_table(table_path)
    except TenantConfError as e:
        _fail(e)

    grid = Table(title="Plans")
    grid.add_column("Key")
    for tier in table.tiers:
        grid.add_column(tier, justify="center")

    entries = [table.entry(tier) for tier in table.tiers]
    for key in sorted(table.limit_keys):
        grid.add_row(key, *(_format_limit(e.limits[key]) for e in entries))
    grid.add_section()
    for key in sorted(table.feature_keys):
        grid.add_row(key, *("[green]✓[/green]" if e.features[key] else "[red]✗[/red]" for e in entries))
    console.print(grid)


@app.command()
def features(
    tier: str = typer.Argument(..., help="Plan tier (e.g. pro)"),
    overrides: Optional[Path] = typer.Option(None, help="Tenant overrides JSON file"),
    table_path: Optional[Path] = typer.Option(None, "--table", help="Plan table JSON file"),
):
    """Resolve the feature set for a tier and optional overrides."""
    from tenantconf.entitlements.resolver import PlanFeatureResolver

    raw_overrides = _read_json(overrides) if overrides else None
    try:
        resolved = PlanFeatureResolver(_plan_table(table_path)).resolve(tier, raw_overrides)
    except (TenantConfError, ValidationError) as e:
        _fail(e)
    console.print_json(data=resolved.as_dict())


@app.command()
def theme(
    preference: Optional[Path] = typer.Option(None, help="Theme preference JSON file"),
):
    """Resolve a theme preference against the default theme."""
    from tenantconf.deps import get_theme_resolver
    from tenantconf.theming.models import ThemePreference

    raw = _read_json(preference) if preference else None
    try:
        pref = ThemePreference.model_validate(raw) if raw is not None else None
    except ValidationError as e:
        _fail(e)
    resolved = get_theme_resolver().resolve(pref)
    console.print_json(data=resolved.model_dump())


@app.command()
def resolve(
    record: Path = typer.Argument(..., help="Tenant record JSON file"),
):
    """Resolve features and theme for a tenant record."""
    from tenantconf.deps import get_tenant_config_service

    try:
        resolved = get_tenant_config_service().resolve(_read_json(record))
    except (TenantConfError, ValidationError) as e:
        _fail(e)
    console.print_json(data=resolved.to_response().model_dump())


@app.command("check-table")
def check_table(
    path: Path = typer.Argument(..., help="Plan table JSON file"),
):
    """Validate a plan table file."""
    from tenantconf.entitlements.table import PlanFeatureTable

    try:
        table = PlanFeatureTable.from_mapping(_read_json(path))
    except TenantConfError as e:
        _fail(e)
    console.print(
        f"[bold green]VALID[/bold green]: {len(table.tiers)} tiers, "
        f"{len(table.feature_keys)} features, {len(table.limit_keys)} limits"
    )


if __name__ == "__main__":
    app()
