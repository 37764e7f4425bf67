"""
Adaptateur Jellyfin.

Implemente les ports hote (ILibraryManager, IIntroManager) via l'API REST
d'un serveur Jellyfin.
"""

from src.adapters.jellyfin.client import JellyfinClient
from src.adapters.jellyfin.retry import HostUnavailableError, request_with_retry

__all__ = [
    "JellyfinClient",
    "HostUnavailableError",
    "request_with_retry",
]
