"""
CLI entry point - Serve the app and check provider configuration.

Subcommands: serve, check-env, check-client.
"""

from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from src.config.diagnostics import (
    Finding,
    Severity,
    check_client_values,
    check_env_values,
    has_errors,
    load_env_file,
)

console = Console()

app = typer.Typer(
    name="practice-english",
    help="英語学習チャット web front end tools.",
    no_args_is_help=True,
)

_STYLE = {Severity.OK: "green", Severity.WARNING: "yellow", Severity.ERROR: "bold red"}
_ICON = {Severity.OK: "✅", Severity.WARNING: "⚠️ ", Severity.ERROR: "❌"}


def _print_findings(title: str, findings: list[Finding]) -> None:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("", width=3)
    table.add_column("Key")
    table.add_column("Result")
    for finding in findings:
        style = _STYLE[finding.severity]
        table.add_row(_ICON[finding.severity], finding.key, f"[{style}]{finding.message}[/{style}]")
    console.print(table)


def _load_or_exit(env_file: Path) -> dict[str, str | None]:
    if not env_file.is_file():
        console.print(f"[bold red]❌ {env_file} not found[/bold red]", soft_wrap=True)
        raise typer.Exit(code=1)
    return load_env_file(env_file)


@app.command(name="check-env")
def check_env(
    env_file: Path = typer.Option(Path(".env"), "--env-file", "-e", help="Path to the .env file."),
) -> None:
    """Check that SUPABASE_URL and SUPABASE_ANON_KEY are set in the .env file."""
    values = _load_or_exit(env_file)
    findings = check_env_values(values)
    _print_findings(f"Environment ({env_file})", findings)

    if has_errors(findings):
        console.print("[bold red]❌ Environment is not configured correctly[/bold red]")
        raise typer.Exit(code=1)
    console.print("[green]✅ All environment variables are set[/green]")
    console.print("Next: run [bold]practice-english serve[/bold] to start the app")


@app.command(name="check-client")
def check_client(
    env_file: Path = typer.Option(Path(".env"), "--env-file", "-e", help="Path to the .env file."),
) -> None:
    """Check that the configured values look usable by a Supabase client."""
    values = _load_or_exit(env_file)
    findings = check_client_values(values)
    _print_findings("Supabase client configuration", findings)

    if has_errors(findings):
        raise typer.Exit(code=1)
    console.print("[green]✅ Supabase client can be initialized with these values[/green]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the web app with uvicorn."""
    uvicorn.run("src.api.main:app", host=host, port=port, reload=reload)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
