"""Authify CLI application using Typer.

This module provides command-line utilities for the Authify backend:
running the API server, creating the database schema, and generating
secrets for deployment configuration.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from authify_config.settings import get_settings

app = typer.Typer(
    name="authify",
    help="Authify - user registration and authentication backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (BACKEND_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (BACKEND_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    host = host or settings.backend_host
    port = port or settings.backend_port

    console.print(
        f"[bold green]Starting {settings.app_name} API[/bold green] "
        f"on [cyan]http://{host}:{port}[/cyan]",
    )
    if settings.uses_default_jwt_secret:
        console.print(
            "[yellow]⚠  JWT_SECRET is not set; the built-in default secret "
            "is in use. Run 'authify secrets generate'.[/yellow]",
        )

    uvicorn.run(
        "authify.presentation.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables. Existing tables are left untouched."""
    from authify.presentation.api.dependencies import create_tables, get_engine

    async def _run() -> None:
        engine = get_engine()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    try:
        asyncio.run(_run())
    except (ConnectionRefusedError, OSError) as e:
        console.print(f"[red]Could not connect to the database: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]Database schema is up to date.[/green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Authify configuration.

    Generates two required secrets:
    - JWT_SECRET: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Authify Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 random bytes, well above the HS256 key size
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET[/cyan]={jwt_secret}", soft_wrap=True)

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]⚠  Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
