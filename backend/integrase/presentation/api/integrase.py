"""
Integrase startup wiring.

prepare()          - validate the list config and mount the webhook routes
announce_routes()  - tell the directory where those routes live (best effort)

The router is always supplied by the embedding application; nothing is
registered globally.
"""

import logging

import httpx
from fastapi import APIRouter, FastAPI
from pydantic import ValidationError

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.domain.entities import ListConfig, ListPatch, ListPatchResponse
from integrase.domain.exceptions import DirectoryAPIError
from integrase.infrastructure.directory import patch_list
from integrase.presentation.api.handlers import (
    make_data_delete_handler,
    make_data_request_handler,
    make_lifecycle_handler,
)

logger = logging.getLogger(__name__)

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def prepare(adapter: BaseListAdapter, router: APIRouter | FastAPI) -> ListConfig:
    """
    Mount the directory webhook routes on ``router``.

    Raises:
        ConfigurationError: list ID or secret key missing; nothing is mounted
    """
    config = adapter.get_config()

    if config.startup_logs:
        logger.info("Starting integrase server")

    config.validate()

    lifecycle = {
        "/claim": adapter.claim_bot,
        "/unclaim": adapter.unclaim_bot,
        "/approve": adapter.approve_bot,
        "/deny": adapter.deny_bot,
    }
    for path, fn in lifecycle.items():
        # Every method reaches the handler so non-POST gets a plain-text 405
        router.add_api_route(
            path,
            make_lifecycle_handler(fn, config),
            methods=ANY_METHOD,
            name=path.lstrip("/"),
            tags=["integrase"],
        )

    router.add_api_route(
        "/data-request",
        make_data_request_handler(adapter, config),
        methods=ANY_METHOD,
        name="data-request",
        tags=["integrase"],
    )
    router.add_api_route(
        "/data-delete",
        make_data_delete_handler(adapter, config),
        methods=ANY_METHOD,
        name="data-delete",
        tags=["integrase"],
    )

    if config.startup_logs:
        logger.info(f"Integrase routes mounted for list {config.list_id}")

    return config


async def announce_routes(
    config: ListConfig, transport: httpx.AsyncBaseTransport | None = None
) -> ListPatchResponse | None:
    """
    PATCH the directory with this list's route URLs.

    Skipped when no domain name is configured. Failures are logged and
    swallowed: returns None instead of raising.
    """
    if not config.domain_name:
        return None

    if config.startup_logs:
        logger.info("Updating Metro Reviews with new routes")

    try:
        patched = await patch_list(
            config, ListPatch.for_domain(config.domain_name), transport=transport
        )
    except (DirectoryAPIError, httpx.HTTPError, httpx.InvalidURL, ValidationError) as e:
        logger.warning(f"Metro Reviews update failed: {e}")
        return None

    if config.startup_logs:
        logger.info(f"Metro Reviews update successful with {patched.has_updated} updated")

    return patched
