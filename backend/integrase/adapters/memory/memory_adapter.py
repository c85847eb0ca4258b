"""
Memory List Adapter
===================

Reference adapter keeping bots in a dict. Useful for local runs and for
checking a deployment end to end before wiring a real list backend.

STATES:
-------
pending   - known to the list, no decision yet
approved  - listed publicly
denied    - rejected by a reviewer

Claiming only records the reviewer; it never changes the state.
"""

import logging
from dataclasses import dataclass
from typing import Any

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.domain.entities import Bot, ListConfig
from integrase.domain.exceptions import AdapterError

logger = logging.getLogger(__name__)

PENDING = "pending"
APPROVED = "approved"
DENIED = "denied"


@dataclass
class StoredBot:
    bot: Bot
    state: str = PENDING
    claimed_by: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "bot": self.bot.model_dump(),
            "state": self.state,
            "claimed_by": self.claimed_by,
        }


class MemoryListAdapter(BaseListAdapter):
    def __init__(self, config: ListConfig, bots: list[Bot] | None = None):
        self.config = config
        self.bots: dict[str, StoredBot] = {}
        for bot in bots or []:
            self.bots[bot.bot_id] = StoredBot(bot=bot)

    def get_config(self) -> ListConfig:
        return self.config

    def _get(self, bot_id: str) -> StoredBot:
        stored = self.bots.get(bot_id)
        if stored is None:
            raise AdapterError(f"Bot {bot_id} not found")
        return stored

    async def claim_bot(self, bot: Bot) -> None:
        stored = self._get(bot.bot_id)
        stored.claimed_by = bot.reviewer
        logger.info(f"Bot {bot.bot_id} claimed by {bot.reviewer}")

    async def unclaim_bot(self, bot: Bot) -> None:
        stored = self._get(bot.bot_id)
        stored.claimed_by = None
        logger.info(f"Bot {bot.bot_id} unclaimed")

    async def approve_bot(self, bot: Bot) -> None:
        stored = self.bots.setdefault(bot.bot_id, StoredBot(bot=bot))
        stored.bot = bot
        stored.state = APPROVED
        stored.claimed_by = None
        logger.info(f"Bot {bot.bot_id} approved by {bot.reviewer}")

    async def deny_bot(self, bot: Bot) -> None:
        stored = self._get(bot.bot_id)
        stored.state = DENIED
        stored.claimed_by = None
        logger.info(f"Bot {bot.bot_id} denied by {bot.reviewer}")

    async def data_request(self, bot_id: str) -> dict[str, Any]:
        return self._get(bot_id).to_dict()

    async def data_delete(self, bot_id: str) -> None:
        self._get(bot_id)
        del self.bots[bot_id]
        logger.info(f"All data for bot {bot_id} deleted")
