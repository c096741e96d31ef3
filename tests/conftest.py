"""Shared test fixtures."""

import os

# Set env BEFORE any era5fetch imports so Settings picks it up
os.environ["ERA5FETCH_DEBUG"] = "true"
os.environ["CDS_API_KEY"] = ""

import pytest

from era5fetch.models.schemas import FetchConfig
from era5fetch.pipelines.era5_pipeline import ERA5Fetcher


class FakeCDSClient:
    """Stands in for cdsapi.Client: records requests and writes a placeholder file."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def retrieve(self, name, request, target=None):
        self.calls.append((name, request, target))
        if self.error is not None:
            raise self.error
        with open(target, "wb") as f:
            f.write(b"CDF\x01")


@pytest.fixture
def fake_client():
    return FakeCDSClient()


@pytest.fixture
def fetcher(fake_client):
    return ERA5Fetcher(client=fake_client, config=FetchConfig())


@pytest.fixture
def raw_dir(tmp_path):
    """Empty data/raw directory under a temporary project root."""
    path = tmp_path / "data" / "raw"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def client_factory():
    return FakeCDSClient
