"""
Adapter smoke tests.

Runs each lifecycle method of an adapter against a sample bot, without the
directory service or an HTTP server:

    tester = AdapterTester(MyListAdapter())
    await tester.approve()
    await tester.claim()
"""

import logging

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.domain.entities import Bot

logger = logging.getLogger(__name__)

_SAMPLE_DESCRIPTION = (
    "Metro Reviews is a pog pog pog bot. This bot is purely for testing purposes."
)

DEFAULT_BOT = Bot(
    bot_id="968734728465289248",  # Metro Reviews bot
    reviewer="510065483693817867",
    username="Metro Reviews",
    description=_SAMPLE_DESCRIPTION,
    long_description=(_SAMPLE_DESCRIPTION + "\n\n") * 100,
    owner="728871946456137770",
    extra_owners=["564164277251080208"],
    invite="https://discord.com/api/oauth2/authorize?client_id=968734728465289248&permissions=8&scope=bot%20applications.commands",
    website="https://metroreviews.xyz",
    github="https://github.com/MetroReviews",
    support="https://discord.gg/49DE35a5eJ",
    nsfw=True,
    review_note="This bot is purely for testing purposes. It is not a real bot.",
    tags=["Utility", "Moderation"],
    reason="Test reason",
    list_source="3b50d5e8-d0a0-4e63-aff7-f81068e9ad36",
)


class AdapterTester:
    """Calls adapter lifecycle methods with DEFAULT_BOT and reports the outcome."""

    def __init__(self, adapter: BaseListAdapter, bot: Bot | None = None):
        self.adapter = adapter
        # Adapters may keep the bot they are given; never hand out DEFAULT_BOT itself
        self.bot = bot or DEFAULT_BOT.model_copy(deep=True)

    async def _run(self, action: str, fn) -> Exception | None:
        try:
            await fn(self.bot)
        except Exception as e:
            logger.warning(f"{action} bot {self.bot.bot_id} failed: {e}")
            return e
        logger.info(f"{action} bot {self.bot.bot_id} succeeded")
        return None

    async def claim(self) -> Exception | None:
        return await self._run("Claim", self.adapter.claim_bot)

    async def unclaim(self) -> Exception | None:
        return await self._run("Unclaim", self.adapter.unclaim_bot)

    async def approve(self) -> Exception | None:
        return await self._run("Approve", self.adapter.approve_bot)

    async def deny(self) -> Exception | None:
        return await self._run("Deny", self.adapter.deny_bot)
