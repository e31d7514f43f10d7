"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.github import UserEndpoint
from adapters.network_client import NetworkClient
from adapters.reachability import NetworkReachability
from core.config import AppSettings, build_client_configuration, write_user_env_vars
from core.domain.errors import APIError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(client: NetworkClient) -> tuple[bool, str]:
    try:
        response = await client.request(UserEndpoint.get_list_user(per_page=1, since=0))
    except APIError as exc:
        return False, f"{exc.kind.value}: {exc.message}"
    return True, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    reachability = NetworkReachability()

    table = Table(title="GitHub Users Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.api_base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Authenticated requests")
    else:
        table.add_row("API token", "OPTIONAL", "No token set -> anonymous rate limits")
    table.add_row("Environment", "OK", settings.environment.value)

    connected = reachability.is_connected
    table.add_row("Network route", "OK" if connected else "FAIL", "default route available" if connected else "offline")

    client = NetworkClient(build_client_configuration(settings), settings=settings, reachability=reachability)
    ok_api, detail_api = asyncio.run(_check_api(client))
    table.add_row("GitHub API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api and settings.api_token:
        _console.print(
            "\n[yellow]Note:[/yellow] 401/403 means the token was rejected. Run `doctor setup-token` again."
        )


@app.command(name="setup-token")
def setup_token() -> None:
    """Store a GitHub API token in the user config .env."""

    token = typer.prompt("GitHub API token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars({"GITHUB_USERS_API_TOKEN": token})
    _console.print(f"[green]Saved token to:[/green] {env_path}")
