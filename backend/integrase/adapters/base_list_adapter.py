"""Base List Adapter - the capabilities every bot list must provide."""

from abc import ABC, abstractmethod
from typing import Any

from integrase.domain.entities import Bot, ListConfig


class BaseListAdapter(ABC):
    """
    Abstract base for all list adapters.

    Lifecycle methods return ``None`` on success and raise on failure; the
    exception message is sent back to the directory in the 400 response.
    """

    @abstractmethod
    def get_config(self) -> ListConfig:
        """Return the list configuration. Must not produce side effects."""
        ...

    @abstractmethod
    async def claim_bot(self, bot: Bot) -> None:
        """Claim the bot if it is present, never add it."""
        ...

    @abstractmethod
    async def unclaim_bot(self, bot: Bot) -> None:
        """Unclaim the bot if it is present, never add it."""
        ...

    @abstractmethod
    async def approve_bot(self, bot: Bot) -> None:
        """Approve the bot, adding it first if it is not present."""
        ...

    @abstractmethod
    async def deny_bot(self, bot: Bot) -> None:
        """Deny the bot if it is present, never add it."""
        ...

    @abstractmethod
    async def data_request(self, bot_id: str) -> dict[str, Any]:
        """Return the bot and everything stored about it as a JSON-serializable map."""
        ...

    @abstractmethod
    async def data_delete(self, bot_id: str) -> None:
        """Delete the bot and everything stored about it."""
        ...
