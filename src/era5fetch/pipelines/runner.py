"""Pipeline runner - downloads the configured ERA5 variables year by year."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from era5fetch.config import settings
from era5fetch.pipelines.era5_pipeline import ERA5Fetcher

logger = logging.getLogger(__name__)


@dataclass
class DownloadSummary:
    downloaded: int = 0
    skipped: int = 0

    def record(self, downloaded: bool) -> None:
        if downloaded:
            self.downloaded += 1
        else:
            self.skipped += 1

    def merge(self, other: "DownloadSummary") -> None:
        self.downloaded += other.downloaded
        self.skipped += other.skipped


def single_level_path(data_dir: Path, variable: str, year: int) -> Path:
    return Path(data_dir) / f"{variable}_{year}.nc"


def pressure_level_path(data_dir: Path, variable: str, level: int, year: int) -> Path:
    return Path(data_dir) / f"{level}hPa_{variable}_{year}.nc"


def download_year_data(
    year: int, fetcher: ERA5Fetcher | None = None, data_dir: Path | None = None
) -> DownloadSummary:
    """Fetch the single-level then the pressure-level variable for one year."""
    fetcher = fetcher or ERA5Fetcher()
    data_dir = Path(data_dir or settings.data_dir)
    summary = DownloadSummary()

    # 2m air temperature, ~31 MB per year at the default extent
    variable = settings.single_level_variable
    summary.record(
        fetcher.fetch_single_level(year, single_level_path(data_dir, variable, year), variable)
    )

    # 500 hPa geopotential, ~31 MB per year at the default extent
    variable = settings.pressure_level_variable
    level = settings.pressure_level
    summary.record(
        fetcher.fetch_pressure_level(
            year, pressure_level_path(data_dir, variable, level, year), variable, level
        )
    )
    return summary


def run(
    years: Iterable[int] | None = None,
    fetcher: ERA5Fetcher | None = None,
    data_dir: Path | None = None,
) -> DownloadSummary:
    """Download every configured year in order.

    Any fetch error propagates and stops the remaining years.
    """
    years = list(years) if years is not None else list(settings.years)
    fetcher = fetcher or ERA5Fetcher()
    summary = DownloadSummary()

    logger.info("Downloading ERA5 data for %d year(s): %s", len(years), years)
    for year in years:
        summary.merge(download_year_data(year, fetcher=fetcher, data_dir=data_dir))

    logger.info(
        "=== ERA5 Summary: %d downloaded, %d skipped ===",
        summary.downloaded,
        summary.skipped,
    )
    return summary
