"""
Chroma collection inspector.

Diagnostic pass-through: fetches the Chroma admin collections listing and
returns the body untouched.

Dependencies: httpx
System role: Vector store administrative API client
"""

import httpx

from ragdemo.core.exceptions import StoreQueryError, StoreUnreachableError
from ragdemo.observability.observer import RagObserver


class CollectionInspector:
    """Blocking client for the Chroma collections endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        collections_path: str = "/api/v1/collections",
        client: httpx.Client | None = None,
        observer: RagObserver | None = None,
    ) -> None:
        """
        Args:
            base_url: Chroma server URL
            collections_path: Admin path listing collections
            client: HTTP client (created with library defaults if None)
            observer: Receives the fetched body
        """
        self._url = base_url.rstrip("/") + collections_path
        self._client = client or httpx.Client()
        self._observer = observer or RagObserver()

    @property
    def url(self) -> str:
        return self._url

    def list_collections(self) -> str:
        """
        Fetch the raw collections listing.

        Returns:
            str: Response body, unparsed

        Raises:
            StoreUnreachableError: Connection refused or timed out
            StoreQueryError: Server answered with an error status
        """
        try:
            response = self._client.get(self._url)
            response.raise_for_status()
        except httpx.TransportError as e:
            raise StoreUnreachableError(
                message=f"Chroma server unreachable: {e}",
                operation="list_collections",
                details={"url": self._url},
            ) from e
        except httpx.HTTPStatusError as e:
            raise StoreQueryError(
                message=f"Chroma returned HTTP {e.response.status_code}",
                operation="list_collections",
                details={"url": self._url},
            ) from e

        body = response.text
        self._observer.collections_fetched(self._url, body)
        return body

    def close(self) -> None:
        self._client.close()
