"""
Entités bibliothèque du serveur média hôte.

Représentations immuables des objets fournis par l'hôte (Jellyfin) :
éléments de la bibliothèque, dossiers virtuels (bibliothèques), utilisateurs
et références d'intros.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ItemType(Enum):
    """Type d'un élément de la bibliothèque, tel que renvoyé par l'hôte."""

    MOVIE = "Movie"
    EPISODE = "Episode"
    SERIES = "Series"
    SEASON = "Season"
    FOLDER = "Folder"
    COLLECTION_FOLDER = "CollectionFolder"
    TRAILER = "Trailer"
    OTHER = "Other"

    @classmethod
    def from_host(cls, value: Optional[str]) -> "ItemType":
        """Convertit le champ Type de l'hôte, OTHER si inconnu."""
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class MediaItem:
    """
    Élément de la bibliothèque de l'hôte.

    Attributs :
        id : Identifiant opaque de l'élément
        name : Nom affiché
        item_type : Type de l'élément (film, épisode, dossier...)
        path : Chemin du média sur le serveur
        parent_id : Identifiant du parent direct, None pour une racine
    """

    id: str
    name: str = ""
    item_type: ItemType = ItemType.OTHER
    path: Optional[str] = None
    parent_id: Optional[str] = None

    @property
    def is_movie(self) -> bool:
        return self.item_type is ItemType.MOVIE

    @property
    def is_collection_folder(self) -> bool:
        return self.item_type is ItemType.COLLECTION_FOLDER


@dataclass(frozen=True)
class VirtualFolder:
    """
    Bibliothèque déclarée sur l'hôte.

    Attributs :
        item_id : Identifiant du dossier racine de la bibliothèque
        name : Nom de la bibliothèque (ex: "Movies")
        collection_type : Type de collection (ex: "movies", "tvshows"), None si mixte
    """

    item_id: str
    name: str
    collection_type: Optional[str] = None

    @property
    def is_movie_library(self) -> bool:
        """Vérifie si la bibliothèque est de type films (insensible à la casse)."""
        return (self.collection_type or "").lower() == "movies"


@dataclass(frozen=True)
class User:
    """Utilisateur à l'origine de la lecture."""

    id: str
    username: str = ""


@dataclass(frozen=True)
class IntroInfo:
    """
    Référence vers une intro à jouer avant l'élément.

    Au moins un des deux champs est renseigné : l'identifiant d'un élément
    de l'hôte, ou un chemin de fichier.
    """

    item_id: Optional[str] = None
    path: Optional[str] = None
