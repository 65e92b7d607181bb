import pytest
from thumbor_bridge.core.settings import Settings
from thumbor_bridge.models.image_metadata import Asset
from thumbor_bridge.services.in_memory_metadata_provider import (
    InMemoryMetadataProvider,
)
from thumbor_bridge.services.preset_resolver import default_registry
from thumbor_bridge.services.thumbor_service import ThumborService

SERVER = "http://thumbor.test"
SECRET = "s3cr3t"


@pytest.fixture
def settings():
    return Settings(_env_file=None, server=SERVER + "/", secret=SECRET)


@pytest.fixture
def unsigned_settings():
    return Settings(_env_file=None, server=SERVER, secret="")


@pytest.fixture
def registry(settings):
    return default_registry(settings)


@pytest.fixture
def provider():
    return InMemoryMetadataProvider(
        {
            "hero": Asset(
                url="https://example.com/uploads/hero.jpg",
                width=2000,
                height=1000,
            ),
            "small": Asset(
                url="https://example.com/uploads/small.png",
                width=200,
                height=100,
            ),
            "nodims": Asset(url="https://example.com/uploads/unknown.gif"),
            "broken": Asset(url="uploads/relative.jpg", width=10, height=10),
        }
    )


@pytest.fixture
def service(unsigned_settings, provider):
    return ThumborService(unsigned_settings, provider=provider)
