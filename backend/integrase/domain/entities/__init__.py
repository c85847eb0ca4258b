from integrase.domain.entities.bot import Bot
from integrase.domain.entities.list_config import ListConfig, load_list_config
from integrase.domain.entities.list_patch import (
    ROUTE_PATHS,
    ListPatch,
    ListPatchResponse,
)

__all__ = [
    "Bot",
    "ListConfig",
    "load_list_config",
    "ROUTE_PATHS",
    "ListPatch",
    "ListPatchResponse",
]
