"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
Les collaborateurs de l'hote sont injectes dans le fournisseur d'intros,
jamais recherches dans un etat global.
"""

from dependency_injector import containers, providers

from .adapters.jellyfin.client import JellyfinClient
from .config import Settings
from .services.intro_provider import CinemaModeIntroProvider


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        provider = container.intro_provider()
        intros = await provider.get_intros(item, user)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client Jellyfin - Singleton partage, implemente les deux ports hote
    jellyfin_client = providers.Singleton(
        JellyfinClient,
        base_url=config.provided.jellyfin_url,
        api_key=config.provided.jellyfin_api_key,
        timeout=config.provided.request_timeout,
    )

    # Fournisseur d'intros - la liste des bibliotheques cibles est lue
    # une seule fois a la construction
    intro_provider = providers.Factory(
        CinemaModeIntroProvider,
        library_manager=jellyfin_client,
        intro_manager=jellyfin_client,
        target_library_names=config.provided.target_library_names,
    )
