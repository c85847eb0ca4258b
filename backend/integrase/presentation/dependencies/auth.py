"""
Shared-secret authorization for directory webhooks.

The directory sends the list's secret key verbatim in the Authorization
header (no Bearer scheme). A request is authorized only when that header is
present, non-empty and equal to the configured key.
"""

import hmac
import logging

from starlette.requests import Request

from integrase.domain.entities import ListConfig

logger = logging.getLogger(__name__)


def is_authorized(request: Request | None, config: ListConfig) -> bool:
    if request is None:
        return False

    supplied = request.headers.get("Authorization", "")
    if not supplied:
        if config.request_logs:
            logger.debug(f"Missing Authorization header on {request.url.path}")
        return False

    # Timing-safe comparison
    if not hmac.compare_digest(
        supplied.encode("utf-8"), config.secret_key.encode("utf-8")
    ):
        if config.request_logs:
            logger.debug(f"Invalid Authorization header on {request.url.path}")
        return False

    return True
