"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, pour suivre les décisions du fournisseur
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique
"""

import sys
from pathlib import Path

from loguru import logger

# Niveaux console pour -v, -vv (et au-delà)
_VERBOSITY_LEVELS = ("DEBUG", "TRACE")


def resolve_log_level(default_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Calcule le niveau console à partir des options -v / -q de la CLI.

    Args :
        default_level : Niveau issu de la configuration (CINEMAMODE_LOG_LEVEL)
        verbose : Nombre d'options -v (0 = niveau configuré)
        quiet : Mode silencieux, prioritaire sur verbose

    Retourne :
        Nom du niveau loguru à utiliser pour la console
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default_level.upper()
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS)) - 1]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinemamode.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Le fichier capture tout à partir de DEBUG : chaque étape du filtrage
    (type, bibliothèque, correspondance) y est tracée.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), console_level=log_level)
