"""
Point d'entrée CLI de CinemaMode.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import intros, libraries
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_log_level
from .utils.constants import APP_VERSION

app = typer.Typer(
    name="cinemamode",
    help="Fournisseur d'intros (bandes-annonces, pré-rolls) pour Jellyfin",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CinemaMode - Intros avant les films."""
    settings = get_config()
    configure_logging(
        log_level=resolve_log_level(settings.log_level, verbose=verbose, quiet=quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(libraries)
app.command()(intros)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CinemaMode")
    typer.echo(f"Serveur Jellyfin : {config.jellyfin_url}")
    typer.echo(f"Clé API : {'configurée' if config.jellyfin_enabled else 'absente'}")
    targets = config.target_library_names
    typer.echo(f"Bibliothèques ciblées : {', '.join(targets) if targets else 'toutes'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CinemaMode v{APP_VERSION}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
