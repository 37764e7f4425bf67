"""
Mecanisme de retry avec backoff exponentiel pour l'API Jellyfin.

Le serveur Jellyfin peut etre momentanement indisponible (redemarrage, scan
de bibliotheque, proxy inverse en erreur). Les reponses 429/502/503/504 et
les erreurs de transport sont relancees avec un delai croissant et du
jitter aleatoire. Les autres erreurs HTTP remontent immediatement.

Usage:
    response = await request_with_retry(client, "GET", "/Library/VirtualFolders")
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from src.utils.constants import RETRYABLE_STATUS_CODES


class HostUnavailableError(Exception):
    """
    Exception levee quand le serveur hote est temporairement indisponible.

    Attributes:
        status_code: Code HTTP recu, ou None pour une erreur de transport
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(
        self,
        status_code: Optional[int] = None,
        retry_after: Optional[int] = None,
    ) -> None:
        self.status_code = status_code
        self.retry_after = retry_after
        reason = f"HTTP {status_code}" if status_code else "erreur de transport"
        super().__init__(f"Hote indisponible ({reason}). Retry after: {retry_after}s")


def with_retry(max_attempts: int = 3, max_wait: int = 10):
    """
    Decorateur relancant sur HostUnavailableError avec backoff exponentiel.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 10)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(HostUnavailableError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(response: httpx.Response) -> Optional[int]:
    header = response.headers.get("Retry-After")
    if header and header.isdigit():
        return int(header)
    return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    max_wait: int = 10,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur indisponibilite.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL (relative au base_url du client)
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        HostUnavailableError: Si l'hote reste indisponible apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise HostUnavailableError() from e
        if response.status_code in RETRYABLE_STATUS_CODES:
            raise HostUnavailableError(response.status_code, _parse_retry_after(response))
        response.raise_for_status()
        return response

    return await _do_request()
