"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import UserDetailEntity, UserEntity


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (desactivable con `--no-banner`)."""

    title = Text("GitHub Users", style="bold cyan")
    subtitle = Text("Browse users • Inspect profiles", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_users_table(users: Iterable[UserEntity], *, title: str = "GitHub Users") -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Login", style="cyan", no_wrap=True)
    table.add_column("Profile", style="magenta")
    table.add_column("Avatar", style="white")
    for index, user in enumerate(users, start=1):
        table.add_row(str(index), user.login, user.html_url, user.avatar_url)
    return table


def build_user_detail_panel(detail: UserDetailEntity) -> Panel:
    """Panel con el detalle de un usuario."""

    title = Text(detail.login or "(unknown)", style="bold yellow")
    body = Text()
    body.append("Profile: ", style="bold")
    body.append(f"{detail.html_url or '-'}\n")
    body.append("Avatar: ", style="bold")
    body.append(f"{detail.avatar_url or '-'}\n")
    body.append("Location: ", style="bold")
    body.append(f"{detail.location or '-'}\n\n")
    body.append(f"Followers: {detail.followers}  ", style="green")
    body.append(f"Following: {detail.following}", style="green")
    return Panel(body, title=title, border_style="yellow")
