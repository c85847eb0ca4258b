"""
Directory Client
================

Talks to the Metro Reviews directory service.

The only call a list makes is PATCH {DIRECTORY_API_URL}/lists/{list_id},
authenticated with the list's secret key in the Authorization header.
DIRECTORY_API_URL is the service root, without a trailing ``/lists``.

No retries: a failed call raises and the caller decides what to do.
"""

import logging

import httpx

from integrase.config.settings import Config
from integrase.domain.entities import ListConfig, ListPatch, ListPatchResponse
from integrase.domain.exceptions import DirectoryAPIError

logger = logging.getLogger(__name__)


class DirectoryClient:
    def __init__(
        self,
        base_url: str,
        secret_key: str,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout = timeout
        # Tests pass an httpx.MockTransport here
        self.transport = transport

    def list_url(self, list_id: str) -> str:
        return f"{self.base_url}/lists/{list_id}"

    async def patch_list(self, list_id: str, patch: ListPatch) -> ListPatchResponse:
        """
        Update the list on the directory.

        Returns:
            ListPatchResponse with the fields the directory updated

        Raises:
            DirectoryAPIError: non-2xx answer, message is the raw response body
            httpx.HTTPError: network failure or timeout
            pydantic.ValidationError: 2xx answer that is not a patch response
        """
        url = self.list_url(list_id)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.patch(
                url,
                json=patch.to_payload(),
                headers={"Authorization": self.secret_key},
            )

        if not response.is_success:
            logger.debug(f"PATCH {url} failed ({response.status_code})")
            raise DirectoryAPIError(response.text, status_code=response.status_code)

        return ListPatchResponse.model_validate_json(response.content)


async def patch_list(
    config: ListConfig,
    patch: ListPatch,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ListPatchResponse:
    """Patch ``config``'s list using the directory settings from Config."""
    client = DirectoryClient(
        Config.DIRECTORY_API_URL,
        config.secret_key,
        timeout=Config.DIRECTORY_TIMEOUT,
        transport=transport,
    )
    return await client.patch_list(config.list_id, patch)
