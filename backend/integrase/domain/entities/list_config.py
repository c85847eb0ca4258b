"""ListConfig - per-list settings, loaded once at startup."""

from dataclasses import dataclass

from integrase.config.settings import Config
from integrase.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class ListConfig:
    list_id: str
    secret_key: str
    # Empty disables self-registration with the directory
    domain_name: str = ""
    startup_logs: bool = False
    request_logs: bool = False
    bind_addr: str = ""

    def validate(self) -> None:
        """Raise ConfigurationError unless the list ID and secret key are set."""
        if not self.list_id:
            raise ConfigurationError("List ID not set")
        if not self.secret_key:
            raise ConfigurationError("Secret Key not set")


def load_list_config() -> ListConfig:
    """Build a ListConfig from the INTEGRASE_* environment settings."""
    return ListConfig(
        list_id=Config.LIST_ID,
        secret_key=Config.SECRET_KEY,
        domain_name=Config.DOMAIN_NAME,
        startup_logs=Config.STARTUP_LOGS,
        request_logs=Config.REQUEST_LOGS,
        bind_addr=Config.BIND_ADDR,
    )
