"""Nexaboard CLI application using Typer.

Command-line utilities for the backend: secret generation for deployment
configuration, schema creation and running the API server.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from sqlalchemy.ext.asyncio import create_async_engine

from nexaboard.infrastructure.persistence.sqlalchemy.init_db import create_tables
from nexaboard_config.settings import get_settings

app = typer.Typer(
    name="nexaboard",
    help="Nexaboard - project management board CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Nexaboard configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Nexaboard Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_database(database_url: str) -> None:
    engine = create_async_engine(database_url, echo=False, pool_pre_ping=True)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing database tables. Existing tables are left untouched."""
    database_url = get_settings().database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    console.print(f"Database: [bold]{db_display}[/bold]")

    asyncio.run(_init_database(database_url))
    console.print("[green]Database schema is up to date.[/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "nexaboard.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
