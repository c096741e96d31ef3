"""ERA5 fetch pipeline - requests reanalysis files from the CDS and skips existing ones."""

from __future__ import annotations

import logging
from pathlib import Path

from era5fetch.config import settings
from era5fetch.errors import map_client_error
from era5fetch.models.enums import DatasetKind
from era5fetch.models.schemas import FetchConfig, RequestSpec

logger = logging.getLogger(__name__)


def get_cds_client():
    """Return a cdsapi.Client configured from settings.

    Falls back to the client's own ~/.cdsapirc lookup when no key is set.
    """
    import cdsapi

    try:
        if settings.cds_key:
            return cdsapi.Client(url=settings.cds_url, key=settings.cds_key)
        return cdsapi.Client()
    except Exception as exc:
        raise map_client_error(exc) from exc


class ERA5Fetcher:
    """Downloads one ERA5 variable-year per call, never re-fetching an existing file.

    An existing file counts as complete: it is not overwritten, size-checked
    or opened.
    """

    def __init__(self, client=None, config: FetchConfig | None = None):
        self._client = client
        self.config = config or FetchConfig.from_settings(settings)

    @property
    def client(self):
        if self._client is None:
            self._client = get_cds_client()
        return self._client

    def fetch_single_level(self, year: int, filename: str | Path, variable: str) -> bool:
        """Fetch a single-level variable for one year. Returns False if skipped."""
        return self._fetch(Path(filename), DatasetKind.SINGLE_LEVEL, year, variable)

    def fetch_pressure_level(
        self, year: int, filename: str | Path, variable: str, level: int
    ) -> bool:
        """Fetch a pressure-level variable at ``level`` hPa for one year. Returns False if skipped."""
        return self._fetch(Path(filename), DatasetKind.PRESSURE_LEVEL, year, variable, level)

    def _fetch(
        self,
        dest: Path,
        kind: DatasetKind,
        year: int,
        variable: str,
        level: int | None = None,
    ) -> bool:
        if dest.exists():
            logger.info("File %s already exists. Skipping download.", dest)
            return False

        spec = RequestSpec.build(kind, year, variable, self.config, level=level)
        dest.parent.mkdir(parents=True, exist_ok=True)
        client = self.client
        logger.info("Requesting %s from %s", dest.name, spec.dataset_name)
        try:
            client.retrieve(spec.dataset_name, spec.to_cds_request(), str(dest))
        except Exception as exc:
            raise map_client_error(exc) from exc
        logger.info("Downloaded: %s", dest)
        return True
