"""
Interfaces ports vers le serveur média hôte.

Interfaces abstraites (ports) définissant ce dont le fournisseur d'intros a
besoin de l'hôte : l'accès en lecture à la bibliothèque et la sélection
effective des intros. Les implémentations (adaptateurs) fournissent l'accès
concret (API REST Jellyfin, doubles en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.library import IntroInfo, MediaItem, User, VirtualFolder


class ILibraryManager(ABC):
    """
    Interface d'accès en lecture à la bibliothèque de l'hôte.

    Toutes les opérations sont des requêtes en lecture seule.
    """

    @abstractmethod
    async def get_virtual_folders(self) -> list[VirtualFolder]:
        """Liste toutes les bibliothèques déclarées, dans l'ordre de l'hôte."""
        ...

    @abstractmethod
    async def get_item_by_id(self, item_id: str) -> Optional[MediaItem]:
        """Récupère un élément par son ID, None si inexistant."""
        ...

    @abstractmethod
    async def get_items_by_ancestor(self, ancestor_id: str) -> list[MediaItem]:
        """
        Liste les éléments contenus (transitivement) sous un ancêtre.

        Args :
            ancestor_id : ID de la racine (généralement un dossier de bibliothèque)

        Retourne :
            Tous les descendants de l'ancêtre
        """
        ...


class IIntroManager(ABC):
    """Interface de sélection des intros à jouer avant un élément."""

    @abstractmethod
    async def get(self, item: MediaItem, user: User) -> list[IntroInfo]:
        """Retourne les intros à jouer pour cet élément et cet utilisateur."""
        ...
