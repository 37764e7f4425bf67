"""
Fixtures pytest partagees pour les tests CinemaMode.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports hote (ILibraryManager, IIntroManager)
- Elements, bibliotheques et utilisateur types
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from src.config import Settings
from src.core.entities.library import IntroInfo, ItemType, MediaItem, User, VirtualFolder
from src.core.ports.host import IIntroManager, ILibraryManager

from tests.fixtures.host_ids import ANIME_ROOT_ID, MOVIES_ROOT_ID, SHOWS_ROOT_ID


@pytest.fixture
def movie_item() -> MediaItem:
    """Film type, range dans la bibliotheque Movies."""
    return MediaItem(
        id="movie-inception",
        name="Inception",
        item_type=ItemType.MOVIE,
        path="/media/movies/Inception (2010)/Inception.mkv",
        parent_id=MOVIES_ROOT_ID,
    )


@pytest.fixture
def episode_item() -> MediaItem:
    """Episode de serie type."""
    return MediaItem(
        id="episode-bb-s01e01",
        name="Pilot",
        item_type=ItemType.EPISODE,
        path="/media/shows/Breaking Bad/S01E01.mkv",
        parent_id="season-bb-1",
    )


@pytest.fixture
def user() -> User:
    return User(id="user-1", username="alice")


@pytest.fixture
def sample_intros() -> list[IntroInfo]:
    return [
        IntroInfo(item_id="trailer-1", path="/media/trailers/dune.mkv"),
        IntroInfo(path="/media/prerolls/cinema.mp4"),
    ]


@pytest.fixture
def virtual_folders() -> list[VirtualFolder]:
    """Bibliotheques declarees sur l'hote, dans l'ordre renvoye."""
    return [
        VirtualFolder(item_id=SHOWS_ROOT_ID, name="Shows", collection_type="tvshows"),
        VirtualFolder(item_id=ANIME_ROOT_ID, name="Anime", collection_type="movies"),
        VirtualFolder(item_id=MOVIES_ROOT_ID, name="Movies", collection_type="movies"),
    ]


@pytest.fixture
def library_roots() -> dict[str, MediaItem]:
    """Dossiers racines des bibliotheques, indexes par ID."""
    return {
        root_id: MediaItem(id=root_id, name=name, item_type=ItemType.COLLECTION_FOLDER)
        for root_id, name in (
            (SHOWS_ROOT_ID, "Shows"),
            (ANIME_ROOT_ID, "Anime"),
            (MOVIES_ROOT_ID, "Movies"),
        )
    }


@pytest.fixture
def mock_library_manager(virtual_folders, library_roots, movie_item) -> AsyncMock:
    """
    Mock de ILibraryManager pour les tests.

    Par defaut, le film type est dans la bibliotheque Movies et les autres
    bibliotheques sont vides. Reconfigurer dans chaque test si necessaire.
    """
    mock = AsyncMock(spec=ILibraryManager)
    mock.get_virtual_folders.return_value = virtual_folders
    mock.get_item_by_id.side_effect = lambda item_id: library_roots.get(item_id)
    mock.get_items_by_ancestor.side_effect = (
        lambda ancestor_id: [movie_item] if ancestor_id == MOVIES_ROOT_ID else []
    )
    return mock


@pytest.fixture
def mock_intro_manager(sample_intros) -> AsyncMock:
    """Mock de IIntroManager retournant deux intros par defaut."""
    mock = AsyncMock(spec=IIntroManager)
    mock.get.return_value = sample_intros
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec fichier de log temporaire."""
    return Settings(
        jellyfin_url="http://jellyfin.test:8096",
        jellyfin_api_key="test-api-key",
        included_libraries="Movies",
        log_file=tmp_path / "test.log",
    )
