"""
Interface port exposée à l'hôte : fournisseur d'intros.

Contrat générique que l'hôte appelle avant la lecture d'un élément pour
obtenir la liste des intros (bandes-annonces, pré-rolls) à jouer.
"""

from abc import ABC, abstractmethod

from src.core.entities.library import IntroInfo, MediaItem, User


class IIntroProvider(ABC):
    """Fournisseur d'intros enregistré auprès de l'hôte."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nom du fournisseur (affiché par l'hôte)."""
        ...

    @abstractmethod
    async def get_intros(self, item: MediaItem, user: User) -> list[IntroInfo]:
        """Retourne les intros à jouer avant l'élément, liste vide sinon."""
        ...

    @abstractmethod
    def get_all_intro_files(self) -> list[str]:
        """Liste tous les fichiers d'intro connus du fournisseur."""
        ...
