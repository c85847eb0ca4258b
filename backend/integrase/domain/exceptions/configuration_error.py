"""
ConfigurationError - Raised when the list ID or secret key is missing.
The server must not start serving.
"""


class ConfigurationError(Exception):
    """Exception raised for missing required list configuration."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
