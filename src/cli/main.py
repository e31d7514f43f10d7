"""CLI principal (Typer + Rich).

Comandos:
- `users`: listado paginado ("load more" hasta N páginas).
- `user`: detalle de un usuario.
- `doctor`: diagnóstico de configuración y conectividad.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_users_json
from cli import doctor
from cli.bootstrap import AppContainer
from cli.ui_components import build_user_detail_panel, build_users_table, print_banner
from core.config import AppSettings
from core.services import UserDetailViewModel, UserListViewModel

app = typer.Typer(no_args_is_help=True, help="Browse GitHub users from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def load_settings() -> AppSettings:
    """Settings válidos o salida con código 1 (config inválida es fatal)."""

    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _bootstrap(verbose: bool) -> AppContainer:
    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    return AppContainer.build(settings)


async def browse_users(view_model: UserListViewModel, *, pages: int) -> UserListViewModel:
    """Carga la primera página y luego dispara "load more" sobre la última fila."""

    await view_model.load_users()
    while view_model.error is None and view_model.pagination.current_page_index < pages:
        loaded = len(view_model.users)
        task = view_model.load_more_if_needed(view_model.users[-1]) if view_model.users else None
        if task is None:
            break
        await task
        if len(view_model.users) == loaded:
            break
    return view_model


@app.command()
def users(
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Pages to load."),
    per_page: int | None = typer.Option(None, "--per-page", min=1, max=100, help="Users per page."),
    json_path: Path | None = typer.Option(None, "--json", help="Also export the list to this JSON file."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP exchanges."),
) -> None:
    """List GitHub users, page by page."""

    container = _bootstrap(verbose)
    if not no_banner:
        print_banner(_console)

    view_model = container.user_list_view_model(page_size=per_page)
    with _console.status("Loading users…"):
        asyncio.run(browse_users(view_model, pages=pages))

    if view_model.users:
        _console.print(build_users_table(view_model.users))
    if json_path is not None and view_model.users:
        out = export_users_json(users=view_model.users, output_path=json_path)
        _console.print(f"[green]Saved JSON:[/green] {out}")
    if view_model.error is not None:
        _console.print(f"[red]{view_model.error_message}[/red]")
        raise typer.Exit(code=1)


@app.command()
def user(
    login: str = typer.Argument(..., help="GitHub login."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP exchanges."),
) -> None:
    """Show a single user's profile."""

    container = _bootstrap(verbose)
    view_model: UserDetailViewModel = container.user_detail_view_model()
    with _console.status(f"Loading {login}…"):
        asyncio.run(view_model.fetch_user_detail(login))

    if view_model.user_detail is None:
        _console.print(f"[red]{view_model.error_message}[/red]")
        raise typer.Exit(code=1)
    _console.print(build_user_detail_panel(view_model.user_detail))


def run() -> None:
    app()
