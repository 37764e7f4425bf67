"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINEMAMODE_,
et peut optionnellement être fournie via un fichier .env.

La liste des bibliothèques ciblées est optionnelle - sans elle, tous les films reçoivent des intros.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


def parse_library_names(raw: Optional[str]) -> list[str]:
    """
    Découpe une liste de bibliothèques séparées par des virgules.

    Les segments sont nettoyés des espaces et les segments vides ignorés.
    Exemple : "Movies, Kids Movies ,, 4K" -> ["Movies", "Kids Movies", "4K"]

    Args :
        raw : Chaîne brute issue de la configuration (peut être None)

    Retourne :
        Liste ordonnée des noms, vide si aucune configuration
    """
    if not raw:
        return []
    return [segment.strip() for segment in raw.split(",") if segment.strip()]


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINEMAMODE_.
    Exemple : CINEMAMODE_INCLUDED_LIBRARIES="Movies, 4K"

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEMAMODE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Serveur Jellyfin
    jellyfin_url: str = Field(default="http://localhost:8096")
    jellyfin_api_key: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=30.0, gt=0)

    # Filtrage : bibliothèques (séparées par des virgules) recevant des intros
    included_libraries: str = Field(default="")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinemamode.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("jellyfin_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def target_library_names(self) -> list[str]:
        """Noms des bibliothèques ciblées, vide = pas de filtrage."""
        return parse_library_names(self.included_libraries)

    @property
    def jellyfin_enabled(self) -> bool:
        """Vérifie si la clé API Jellyfin est configurée."""
        return self.jellyfin_api_key is not None
