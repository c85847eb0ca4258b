"""
DOMAIN EXCEPTIONS

ConfigurationError is fatal at startup. DirectoryAPIError is raised by the
directory client and logged by the startup announcement. AdapterError is
what list adapters raise; the webhook handlers turn any adapter exception
into a 400 carrying its message.
"""

from integrase.domain.exceptions.configuration_error import ConfigurationError
from integrase.domain.exceptions.directory_api_error import DirectoryAPIError
from integrase.domain.exceptions.adapter_error import AdapterError

__all__ = [
    "ConfigurationError",
    "DirectoryAPIError",
    "AdapterError",
]
