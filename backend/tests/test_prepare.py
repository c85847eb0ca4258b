import pytest
from fastapi import APIRouter

from integrase.domain.entities import ListConfig
from integrase.domain.exceptions import ConfigurationError
from integrase.fastapi_app import create_fastapi_app
from integrase.presentation.api.integrase import prepare

from conftest import RecordingListAdapter

EXPECTED_PATHS = {"/claim", "/unclaim", "/approve", "/deny", "/data-request", "/data-delete"}


def test_prepare_mounts_every_route_on_given_router(adapter):
    router = APIRouter()

    config = prepare(adapter, router)

    assert config is adapter.get_config()
    assert {route.path for route in router.routes} == EXPECTED_PATHS


def test_prepare_uses_prefix_of_embedding_router(adapter):
    router = APIRouter(prefix="/integrase")

    prepare(adapter, router)

    assert "/integrase/claim" in {route.path for route in router.routes}


@pytest.mark.parametrize(
    "config,message",
    [
        (ListConfig(list_id="", secret_key="key"), "List ID not set"),
        (ListConfig(list_id="list", secret_key=""), "Secret Key not set"),
        (ListConfig(list_id="", secret_key=""), "List ID not set"),
    ],
)
def test_missing_required_config_aborts_before_registering(config, message):
    router = APIRouter()

    with pytest.raises(ConfigurationError, match=message):
        prepare(RecordingListAdapter(config), router)

    assert router.routes == []


def test_app_factory_refuses_bad_config():
    with pytest.raises(ConfigurationError):
        create_fastapi_app(RecordingListAdapter(ListConfig(list_id="", secret_key="key")))


def test_prepare_logs_when_startup_logs_enabled(caplog):
    config = ListConfig(list_id="list", secret_key="key", startup_logs=True)

    with caplog.at_level("INFO", logger="integrase"):
        prepare(RecordingListAdapter(config), APIRouter())

    assert "Starting integrase server" in caplog.text


def test_prepare_is_quiet_without_startup_logs(adapter, caplog):
    with caplog.at_level("INFO", logger="integrase"):
        prepare(adapter, APIRouter())

    assert "Starting integrase server" not in caplog.text
