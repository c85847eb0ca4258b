import os
import sys
from typing import Any

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fastapi.testclient import TestClient

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.domain.entities import Bot, ListConfig
from integrase.domain.exceptions import AdapterError
from integrase.fastapi_app import create_fastapi_app

SECRET_KEY = "test-secret"
LIST_ID = "5c1d9d2e-0000-4000-8000-000000000001"

LIFECYCLE_ROUTES = {
    "/claim": "claim_bot",
    "/unclaim": "unclaim_bot",
    "/approve": "approve_bot",
    "/deny": "deny_bot",
}


class RecordingListAdapter(BaseListAdapter):
    """Adapter fake recording every call; raises AdapterError(error) when error is set."""

    def __init__(self, config: ListConfig):
        self.config = config
        self.calls: list[tuple[str, Any]] = []
        self.error: str | None = None
        self.data: Any = {"bot_id": "1", "state": "approved"}

    def get_config(self) -> ListConfig:
        return self.config

    async def _record(self, name: str, arg: Any) -> None:
        self.calls.append((name, arg))
        if self.error:
            raise AdapterError(self.error)

    async def claim_bot(self, bot: Bot) -> None:
        await self._record("claim_bot", bot)

    async def unclaim_bot(self, bot: Bot) -> None:
        await self._record("unclaim_bot", bot)

    async def approve_bot(self, bot: Bot) -> None:
        await self._record("approve_bot", bot)

    async def deny_bot(self, bot: Bot) -> None:
        await self._record("deny_bot", bot)

    async def data_request(self, bot_id: str) -> dict[str, Any]:
        await self._record("data_request", bot_id)
        return self.data

    async def data_delete(self, bot_id: str) -> None:
        await self._record("data_delete", bot_id)


@pytest.fixture()
def list_config():
    return ListConfig(list_id=LIST_ID, secret_key=SECRET_KEY)


@pytest.fixture()
def adapter(list_config):
    return RecordingListAdapter(list_config)


@pytest.fixture()
def app(adapter):
    """Create a new FastAPI app instance for each test."""
    return create_fastapi_app(adapter)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Headers carrying the list's shared secret."""
    return {"Authorization": SECRET_KEY}


@pytest.fixture()
def bot_payload():
    return {
        "bot_id": "968734728465289248",
        "reviewer": "510065483693817867",
        "username": "Metro Reviews",
        "description": "A bot for testing",
        "long_description": "A bot for testing, at length",
        "nsfw": False,
        "tags": ["Utility"],
        "owner": "728871946456137770",
        "extra_owners": ["564164277251080208"],
        "list_source": LIST_ID,
        "cross_add": True,
        "website": "https://metroreviews.xyz",
        "prefix": "!",
    }
