"""
Constantes globales pour CinemaMode.

Ce module contient les constantes utilisees dans l'application:
- Nom du fournisseur d'intros declare a l'hote
- Champs supplementaires demandes a l'API Jellyfin
- Codes HTTP consideres comme des indisponibilites passageres de l'hote
"""

# Nom sous lequel le fournisseur est enregistre aupres de l'hote
PROVIDER_NAME = "CinemaMode"

# Version de l'application
APP_VERSION = "0.1.0"

# Champs a inclure dans les reponses /Items (absents par defaut)
JELLYFIN_ITEM_FIELDS = "Path,ParentId"

# En-tete d'authentification par cle API
JELLYFIN_TOKEN_HEADER = "X-Emby-Token"

# Indisponibilites passageres : rate limiting et erreurs de passerelle
RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
