"""
AdapterError - Raised by list adapters when a webhook cannot be applied.
Maps to: HTTP 400 Bad Request
"""


class AdapterError(Exception):
    """Exception raised by a list adapter."""

    def __init__(self, message: str = "Request could not be handled by the list"):
        super().__init__(message)
