"""Command-line interface for running and provisioning the users API."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from src.users_api.core.exceptions import DatabaseUnavailableError
from src.users_api.runtime.config.config_data import DatabaseConfig
from src.users_api.runtime.context import get_config
from src.users_api.runtime.init_db import init_db

console = Console()

app = typer.Typer(
    name="users-api",
    help="Users API - serve the REST API and manage its database",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit("[bold green]Starting users API[/bold green]", border_style="green")
    )
    console.print(
        f"[blue]Serving at:[/blue] http://{host}:{port}{config.app.base_path}/users"
    )
    uvicorn.run(
        "src.users_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


@app.command(name="init-db")
def init_db_command(
    database_url: str | None = typer.Option(
        None, help="Connection string to use instead of the configured one"
    ),
) -> None:
    """Create the users table if it does not exist."""
    db_config = get_config().database
    if database_url:
        db_config = DatabaseConfig(url=database_url, echo=db_config.echo)

    try:
        init_db(db_config)
    except DatabaseUnavailableError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    console.print("[green]Database schema is up to date[/green]")


if __name__ == "__main__":
    app()
