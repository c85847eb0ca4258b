"""
DirectoryAPIError - Raised when the directory answers with a non-2xx status.
The message is the raw response body.
"""


class DirectoryAPIError(Exception):
    """Non-2xx answer from the directory service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
