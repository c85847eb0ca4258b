"""
Integrase
=========

Integration shim for bot lists that take part in Metro Reviews.

A list implements ``BaseListAdapter``; ``prepare()`` mounts the webhook
routes the directory calls (claim, unclaim, approve, deny, data request,
data deletion) on a router owned by the embedding application, and
``announce_routes()`` tells the directory where those routes live.
"""

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.domain.entities import Bot, ListConfig, ListPatch, ListPatchResponse
from integrase.presentation.api.integrase import announce_routes, prepare

__all__ = [
    "BaseListAdapter",
    "Bot",
    "ListConfig",
    "ListPatch",
    "ListPatchResponse",
    "announce_routes",
    "prepare",
]
