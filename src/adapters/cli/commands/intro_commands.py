"""
Commande CLI executant la decision d'intros pour un element et un utilisateur.
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.helpers import console, with_container


def intros(
    item_id: Annotated[
        str,
        typer.Argument(help="ID Jellyfin de l'element a lire"),
    ],
    user_id: Annotated[
        str,
        typer.Option("--user", "-u", help="ID Jellyfin de l'utilisateur"),
    ],
) -> None:
    """Affiche les intros que CinemaMode fournirait pour un element."""
    asyncio.run(_intros_async(item_id, user_id))


@with_container()
async def _intros_async(container, item_id: str, user_id: str) -> None:
    """Implementation async de la commande intros."""
    client = container.jellyfin_client()
    provider = container.intro_provider()

    item = await client.get_item_by_id(item_id)
    if item is None:
        console.print(f"[red]Element introuvable: {item_id}[/red]")
        raise typer.Exit(code=1)

    user = await client.get_user(user_id)
    if user is None:
        console.print(f"[red]Utilisateur introuvable: {user_id}[/red]")
        raise typer.Exit(code=1)

    result = await provider.get_intros(item, user)

    console.print(f"[bold cyan]{item.name}[/bold cyan] ({item.item_type.value})")
    if not result:
        console.print("[yellow]Aucune intro.[/yellow]")
        return

    console.print(f"{len(result)} intro(s):")
    for intro in result:
        label = intro.path or intro.item_id
        console.print(f"  [green]>[/green] {label}")
