"""
Client Jellyfin pour l'acces a la bibliotheque et aux bandes-annonces.

Implemente ILibraryManager (dossiers virtuels, elements, requete par ancetre)
et IIntroManager (bandes-annonces locales de l'element) au-dessus de l'API
REST de Jellyfin. Utilise le mecanisme de retry pour les indisponibilites
passageres du serveur.

Usage:
    client = JellyfinClient(base_url="http://localhost:8096", api_key="xxx")
    folders = await client.get_virtual_folders()
    item = await client.get_item_by_id("f27caa37e5142225cceded48f6553502")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.jellyfin.retry import request_with_retry
from src.core.entities.library import IntroInfo, ItemType, MediaItem, User, VirtualFolder
from src.core.ports.host import IIntroManager, ILibraryManager
from src.utils.constants import JELLYFIN_ITEM_FIELDS, JELLYFIN_TOKEN_HEADER


class JellyfinClient(ILibraryManager, IIntroManager):
    """
    Client API Jellyfin.

    Implemente les deux ports hote avec:
    - Enumeration des bibliotheques (/Library/VirtualFolders)
    - Recuperation d'un element par ID et requete des descendants (/Items)
    - Bandes-annonces locales d'un film comme intros (/Items/{id}/LocalTrailers)
    - Retry automatique sur 429/502/503/504 et erreurs de transport

    Example:
        client = JellyfinClient(base_url="http://jellyfin:8096", api_key="xxx")
        user = await client.get_user("6c1b2c7a...")
        intros = await client.get(item, user)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client Jellyfin.

        Args:
            base_url: URL du serveur (ex: http://localhost:8096)
            api_key: Cle API Jellyfin (Tableau de bord > Cles API)
            timeout: Delai maximum d'une requete en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._api_key:
                headers[JELLYFIN_TOKEN_HEADER] = self._api_key
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=self._timeout,
            )
        return self._client

    async def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        client = self._get_client()
        response = await request_with_retry(client, "GET", url, params=params)
        return response.json()

    async def get_virtual_folders(self) -> list[VirtualFolder]:
        """Liste les bibliotheques declarees sur le serveur."""
        data = await self._get_json("/Library/VirtualFolders")
        folders = [
            VirtualFolder(
                item_id=entry["ItemId"],
                name=entry.get("Name") or "",
                collection_type=entry.get("CollectionType"),
            )
            for entry in data
            if entry.get("ItemId")
        ]
        logger.debug(f"Jellyfin: {len(folders)} bibliotheque(s)")
        return folders

    async def get_item_by_id(self, item_id: str) -> Optional[MediaItem]:
        """
        Recupere un element par son ID.

        Args:
            item_id: ID Jellyfin de l'element

        Returns:
            MediaItem, ou None si l'element n'existe pas
        """
        try:
            data = await self._get_json(
                "/Items",
                params={"ids": item_id, "fields": JELLYFIN_ITEM_FIELDS},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

        items = data.get("Items", [])
        if not items:
            return None
        return self._to_media_item(items[0])

    async def get_items_by_ancestor(self, ancestor_id: str) -> list[MediaItem]:
        """Liste recursivement tous les elements sous un ancetre."""
        data = await self._get_json(
            "/Items",
            params={
                "parentId": ancestor_id,
                "recursive": "true",
                "fields": JELLYFIN_ITEM_FIELDS,
            },
        )
        return [self._to_media_item(entry) for entry in data.get("Items", [])]

    async def get(self, item: MediaItem, user: User) -> list[IntroInfo]:
        """
        Retourne les bandes-annonces locales de l'element comme intros.

        Args:
            item: Film sur le point d'etre lu
            user: Utilisateur demandant la lecture

        Returns:
            Liste d'IntroInfo (vide si le film n'a pas de bande-annonce locale)
        """
        data = await self._get_json(
            f"/Items/{item.id}/LocalTrailers",
            params={"userId": user.id},
        )
        return [
            IntroInfo(item_id=entry.get("Id"), path=entry.get("Path"))
            for entry in data
        ]

    async def get_user(self, user_id: str) -> Optional[User]:
        """Recupere un utilisateur par son ID, None si inexistant."""
        try:
            data = await self._get_json(f"/Users/{user_id}")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise
        return User(id=data["Id"], username=data.get("Name") or "")

    @staticmethod
    def _to_media_item(entry: dict[str, Any]) -> MediaItem:
        return MediaItem(
            id=entry["Id"],
            name=entry.get("Name") or "",
            item_type=ItemType.from_host(entry.get("Type")),
            path=entry.get("Path"),
            parent_id=entry.get("ParentId"),
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
