"""
Utilitaires partages pour les commandes CLI de CinemaMode.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant le client Jellyfin
"""

from functools import wraps

from rich.console import Console

from src.container import Container

console = Console()


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client Jellyfin partage est ferme a la sortie de la commande,
    y compris en cas d'erreur.

    Usage:
        @with_container()
        async def my_command(container, ...):
            provider = container.intro_provider()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.jellyfin_client().close()
        return wrapper
    return decorator
