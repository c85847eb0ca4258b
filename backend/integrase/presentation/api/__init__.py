"""
Webhook API - endpoints the directory calls, and the startup wiring that
mounts them on an application's router.
"""

from integrase.presentation.api.handlers import (
    make_data_delete_handler,
    make_data_request_handler,
    make_lifecycle_handler,
)
from integrase.presentation.api.integrase import announce_routes, prepare

__all__ = [
    "make_lifecycle_handler",
    "make_data_request_handler",
    "make_data_delete_handler",
    "prepare",
    "announce_routes",
]
