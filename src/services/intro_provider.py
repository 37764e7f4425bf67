"""
Fournisseur d'intros CinemaMode.

Decide, pour un element et un utilisateur, s'il faut jouer des intros
(bandes-annonces, pre-rolls) avant la lecture. Seuls les films sont concernes,
et si des bibliotheques cibles sont configurees, seulement les films de ces
bibliotheques. La selection effective des intros est deleguee a l'hote.

Toute erreur pendant la recherche de la bibliotheque d'un element donne
"pas d'intros" : le fournisseur refuse plutot que de deviner.
"""

from typing import Iterable, Optional

from loguru import logger

from src.config import parse_library_names
from src.core.entities.library import IntroInfo, MediaItem, User
from src.core.ports.host import IIntroManager, ILibraryManager
from src.core.ports.intro_provider import IIntroProvider
from src.utils.constants import PROVIDER_NAME


class CinemaModeIntroProvider(IIntroProvider):
    """
    Fournisseur d'intros filtrant par type d'element et par bibliotheque.

    Les collaborateurs de l'hote sont injectes a la construction. La liste des
    bibliotheques cibles est figee a la construction et jamais modifiee, ce qui
    permet des appels concurrents sans verrou.

    Example:
        provider = CinemaModeIntroProvider(
            library_manager=client,
            intro_manager=client,
            target_library_names=["Movies", "4K"],
        )
        intros = await provider.get_intros(item, user)
    """

    def __init__(
        self,
        library_manager: ILibraryManager,
        intro_manager: IIntroManager,
        target_library_names: Iterable[str] = (),
    ) -> None:
        """
        Initialise le fournisseur.

        Args:
            library_manager: Acces en lecture a la bibliotheque de l'hote
            intro_manager: Selection des intros deleguee a l'hote
            target_library_names: Bibliotheques ciblees (vide = tous les films),
                ou chaine separee par des virgules comme dans la configuration
        """
        self._library_manager = library_manager
        self._intro_manager = intro_manager
        if isinstance(target_library_names, str):
            target_library_names = parse_library_names(target_library_names)
        self._target_library_names: tuple[str, ...] = tuple(target_library_names)
        self._target_keys = frozenset(name.casefold() for name in self._target_library_names)

        if self._target_library_names:
            logger.info(
                f"CinemaMode initialise, bibliotheques cibles : "
                f"{', '.join(self._target_library_names)}"
            )
        else:
            logger.info("CinemaMode initialise sans filtrage de bibliotheque")

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @property
    def target_library_names(self) -> tuple[str, ...]:
        """Bibliotheques ciblees, dans l'ordre de la configuration."""
        return self._target_library_names

    def matches_target(self, library_name: Optional[str]) -> bool:
        """Verifie si un nom de bibliotheque fait partie des cibles (insensible a la casse)."""
        return (library_name or "").casefold() in self._target_keys

    async def get_intros(self, item: MediaItem, user: User) -> list[IntroInfo]:
        """
        Retourne les intros a jouer avant l'element.

        Etapes:
        1. Element autre qu'un film -> aucune intro
        2. Pas de bibliotheque cible -> delegation directe
        3. Sinon recherche de la bibliotheque de films contenant l'element,
           aucune intro si introuvable ou hors des cibles
        4. Delegation a l'IIntroManager, resultat renvoye tel quel

        Args:
            item: Element sur le point d'etre lu
            user: Utilisateur demandant la lecture

        Returns:
            Liste des intros, vide si l'element est filtre
        """
        logger.debug(f"Intros demandees pour '{item.name}' (ID: {item.id}) par '{user.username}'")

        if not item.is_movie:
            logger.debug(
                f"Pas d'intros pour '{item.name}' - pas un film (type: {item.item_type.value})"
            )
            return []

        if self._target_library_names:
            library = await self._get_library_from_item(item)
            if library is None:
                logger.warning(
                    f"Bibliotheque introuvable pour '{item.name}' (chemin: {item.path})"
                )
                return []

            if not self.matches_target(library.name):
                logger.info(
                    f"Pas d'intros pour '{item.name}' - bibliotheque '{library.name}' "
                    f"hors des cibles ({', '.join(self._target_library_names)})"
                )
                return []

            logger.info(f"'{item.name}' est dans la bibliotheque cible '{library.name}'")
        else:
            logger.debug("Filtrage par bibliotheque desactive, intros pour tous les films")

        intros = list(await self._intro_manager.get(item, user))

        logger.info(f"{len(intros)} intro(s) trouvee(s) pour '{item.name}'")
        for intro in intros:
            logger.debug(f"Intro: item_id={intro.item_id}, path={intro.path}")

        return intros

    def get_all_intro_files(self) -> list[str]:
        """Non supporte : le fournisseur ne gere aucun fichier d'intro propre."""
        return []

    async def _get_library_from_item(self, item: MediaItem) -> Optional[MediaItem]:
        """
        Recherche la bibliotheque de films contenant l'element.

        Parcourt les bibliotheques dans l'ordre de l'hote et retourne le dossier
        racine de la premiere bibliotheque de films qui contient l'element.

        Returns:
            Dossier racine de la bibliotheque, ou None si introuvable ou en erreur
        """
        try:
            folders = await self._library_manager.get_virtual_folders()
            logger.debug(f"{len(folders)} bibliotheque(s) declaree(s)")

            for folder in folders:
                if not folder.is_movie_library:
                    logger.debug(
                        f"Bibliotheque '{folder.name}' ignoree (type: {folder.collection_type})"
                    )
                    continue

                root = await self._library_manager.get_item_by_id(folder.item_id)
                if root is None or not root.is_collection_folder:
                    logger.warning(
                        f"Dossier introuvable pour la bibliotheque '{folder.name}' "
                        f"(ID: {folder.item_id})"
                    )
                    continue

                if await self._is_item_in_library(item, root):
                    logger.debug(f"'{item.name}' appartient a la bibliotheque '{folder.name}'")
                    return root

            logger.warning(f"Aucune bibliotheque de films ne contient '{item.name}'")
        except Exception as e:
            logger.error(f"Erreur lors de la recherche de la bibliotheque de '{item.name}': {e}")
        return None

    async def _is_item_in_library(self, item: MediaItem, library_root: MediaItem) -> bool:
        """Teste l'appartenance via une requete sur les descendants de la racine."""
        try:
            descendants = await self._library_manager.get_items_by_ancestor(library_root.id)
        except Exception as e:
            logger.error(
                f"Erreur lors du test d'appartenance de '{item.name}' "
                f"a '{library_root.name}': {e}"
            )
            return False

        found = any(descendant.id == item.id for descendant in descendants)
        logger.debug(
            f"'{item.name}' dans '{library_root.name}': {found} "
            f"({len(descendants)} element(s))"
        )
        return found
