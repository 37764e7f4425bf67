"""
Commande CLI listant les bibliotheques de l'hote et leur statut de filtrage.
"""

import asyncio

from rich.table import Table

from src.adapters.cli.helpers import console, with_container


def libraries() -> None:
    """Liste les bibliotheques Jellyfin et indique celles qui recoivent des intros."""
    asyncio.run(_libraries_async())


@with_container()
async def _libraries_async(container) -> None:
    """
    Implementation async de la commande libraries.

    Le statut est calcule sur le nom du dossier racine (CollectionFolder),
    comme le fait le fournisseur, et non sur le nom du dossier virtuel.
    """
    client = container.jellyfin_client()
    provider = container.intro_provider()

    folders = await client.get_virtual_folders()
    if not folders:
        console.print("[yellow]Aucune bibliotheque declaree sur le serveur.[/yellow]")
        return

    filtering = bool(provider.target_library_names)

    table = Table(title="Bibliotheques Jellyfin")
    table.add_column("Nom", style="bold")
    table.add_column("Type")
    table.add_column("ID", style="dim")
    table.add_column("Intros")

    for folder in folders:
        if not folder.is_movie_library:
            status = "[dim]non (pas des films)[/dim]"
        elif not filtering:
            status = "[green]oui[/green]"
        else:
            root = await client.get_item_by_id(folder.item_id)
            if root is None or not root.is_collection_folder:
                status = "[red]non (racine introuvable)[/red]"
            elif provider.matches_target(root.name):
                status = "[green]oui[/green]"
            else:
                status = "[red]non (hors cibles)[/red]"
        table.add_row(folder.name, folder.collection_type or "-", folder.item_id, status)

    console.print(table)
    if filtering:
        console.print(f"[dim]Cibles: {', '.join(provider.target_library_names)}[/dim]")
    else:
        console.print("[dim]Aucune cible configuree: tous les films recoivent des intros.[/dim]")
