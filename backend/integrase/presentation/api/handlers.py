"""
Webhook Handlers
================

Endpoint factories for the routes the directory calls. Each factory closes
over the list configuration and the adapter callable, so handlers hold no
state of their own.

RESPONSES:
----------
All failures are plain text:
405 - lifecycle route called with anything but POST
401 - Authorization header missing or wrong
400 - unreadable body, bad JSON, missing bot_id, or the adapter raised
"""

import json
import logging
from typing import Any, Awaitable, Callable

from pydantic import ValidationError
from starlette.requests import ClientDisconnect, Request
from starlette.responses import PlainTextResponse, Response

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.domain.entities import Bot, ListConfig
from integrase.presentation.dependencies.auth import is_authorized

logger = logging.getLogger(__name__)

LifecycleFunction = Callable[[Bot], Awaitable[None]]
Endpoint = Callable[[Request], Awaitable[Response]]

OK_BODY = "OK :)"
DATA_DELETED_BODY = (
    "All associated data has been deleted from this list according to the lists adapter"
)


def _text(status_code: int, body: str) -> PlainTextResponse:
    return PlainTextResponse(body, status_code=status_code)


def _unauthorized() -> PlainTextResponse:
    return _text(401, "Unauthorized")


def _adapter_failed(request: Request, exc: Exception) -> PlainTextResponse:
    logger.warning(f"Adapter failed on {request.url.path}: {exc}")
    return _text(400, f"Request handle error: {exc}")


def make_lifecycle_handler(fn: LifecycleFunction, config: ListConfig) -> Endpoint:
    """
    Build the endpoint for one of claim/unclaim/approve/deny.

    Args:
        fn: adapter coroutine receiving the decoded Bot
        config: list configuration holding the shared secret

    Returns:
        async endpoint taking a Starlette Request
    """

    async def handle(request: Request) -> Response:
        if request.method != "POST":
            return _text(405, "Method not allowed")

        if not is_authorized(request, config):
            return _unauthorized()

        try:
            body = await request.body()
        except ClientDisconnect as e:
            return _text(400, f"Bad Request: {e}")

        try:
            bot = Bot.model_validate_json(body)
        except ValidationError as e:
            return _text(400, f"Serialization error occured: {e}")

        if config.request_logs:
            logger.info(f"{request.url.path} for bot {bot.bot_id} by {bot.reviewer}")

        try:
            await fn(bot)
        except Exception as e:
            return _adapter_failed(request, e)

        return _text(200, OK_BODY)

    return handle


def _bot_id(request: Request) -> str:
    return request.query_params.get("bot_id", "")


def make_data_request_handler(
    adapter: BaseListAdapter, config: ListConfig
) -> Endpoint:
    """Build the /data-request endpoint: everything the list stores about a bot, as JSON."""

    async def handle(request: Request) -> Response:
        if not is_authorized(request, config):
            return _unauthorized()

        bot_id = _bot_id(request)
        if not bot_id:
            return _text(400, "Bot ID is missing")

        if config.request_logs:
            logger.info(f"Data request for bot {bot_id}")

        try:
            data: Any = await adapter.data_request(bot_id)
        except Exception as e:
            return _adapter_failed(request, e)

        try:
            payload = json.dumps(data, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            return _text(400, f"Serialization error occured: {e}")

        return Response(payload, status_code=200, media_type="application/json")

    return handle


def make_data_delete_handler(adapter: BaseListAdapter, config: ListConfig) -> Endpoint:
    """Build the /data-delete endpoint."""

    async def handle(request: Request) -> Response:
        if not is_authorized(request, config):
            return _unauthorized()

        bot_id = _bot_id(request)
        if not bot_id:
            return _text(400, "Bot ID is missing")

        if config.request_logs:
            logger.info(f"Data deletion for bot {bot_id}")

        try:
            await adapter.data_delete(bot_id)
        except Exception as e:
            return _adapter_failed(request, e)

        return _text(200, DATA_DELETED_BODY)

    return handle
