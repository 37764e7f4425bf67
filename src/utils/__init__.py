"""
Utilitaires et constantes pour CinemaMode.

Ce module contient les constantes partagees.
"""

from src.utils.constants import (
    APP_VERSION,
    JELLYFIN_ITEM_FIELDS,
    JELLYFIN_TOKEN_HEADER,
    PROVIDER_NAME,
    RETRYABLE_STATUS_CODES,
)

__all__ = [
    "APP_VERSION",
    "JELLYFIN_ITEM_FIELDS",
    "JELLYFIN_TOKEN_HEADER",
    "PROVIDER_NAME",
    "RETRYABLE_STATUS_CODES",
]
