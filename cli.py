"""
RBAC Admin CLI.

Command-line interface for common operations: schema creation, seeding,
truncation, route listing and running the server.
"""

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

app = typer.Typer(
    name="rbac-admin",
    help="RBAC and attendance administration CLI",
    add_completion=False,
)
console = Console()

ProviderOption = typer.Option(
    None,
    "--provider",
    "-p",
    help="Database provider (postgresql, mysql, sqlserver). Defaults to DEFAULT_DB_PROVIDER",
)


# =============================================================================
# Database Commands
# =============================================================================

@app.command()
def init_db(provider: Optional[str] = ProviderOption):
    """Create every table that does not exist yet."""
    from rest_api.models import Base
    from shared.infrastructure.db import get_engine, resolve_provider

    name = resolve_provider(provider)
    console.print(f"[blue]Creating tables on: {name}[/blue]")

    try:
        Base.metadata.create_all(bind=get_engine(name))
        console.print(f"[green]✓ {len(Base.metadata.tables)} tables verified[/green]")
    except Exception as e:
        console.print(f"[red]✗ Table creation failed: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def seed(provider: Optional[str] = ProviderOption):
    """Seed modules, forms, permissions, the administrator role and the admin user."""
    from rest_api.seed import seed as run_seed
    from shared.infrastructure.db import get_db_context

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task("Seeding database...", total=None)
            with get_db_context(provider) as db:
                run_seed(db)
        console.print("[green]✓ Seed complete[/green]")
    except Exception as e:
        console.print(f"[red]✗ Seeding failed: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def truncate(
    provider: Optional[str] = ProviderOption,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Drop and recreate every table. All data is lost."""
    from rest_api.models import Base
    from shared.infrastructure.db import get_engine, resolve_provider

    name = resolve_provider(provider)
    if not yes:
        typer.confirm(f"Delete ALL data in the {name} database?", abort=True)

    engine = get_engine(name)
    try:
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        console.print(f"[red]✗ Truncate failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ {name} database truncated[/green]")


# =============================================================================
# API Commands
# =============================================================================

@app.command()
def routes():
    """List the API routes."""
    from rest_api.main import app as api

    table = Table(title="API Routes")
    table.add_column("Method", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Name", style="yellow")

    # Read from the OpenAPI document, which covers routes of included routers
    for path, operations in api.openapi()["paths"].items():
        for method, operation in operations.items():
            table.add_row(method.upper(), path, operation.get("summary", ""))

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port (defaults to REST_API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the REST API with uvicorn."""
    import uvicorn

    from shared.config.settings import settings

    uvicorn.run(
        "rest_api.main:app",
        host=host,
        port=port or settings.rest_api_port,
        reload=reload,
    )


@app.command()
def version():
    """Show version information."""
    from importlib.metadata import PackageNotFoundError, version as package_version

    try:
        api_version = package_version("rbac-admin")
    except PackageNotFoundError:
        api_version = "0.1.0"

    table = Table(title="RBAC Admin Version")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")

    table.add_row("API", api_version)
    table.add_row("Python", sys.version.split()[0])

    console.print(table)


if __name__ == "__main__":
    app()
