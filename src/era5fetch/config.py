from __future__ import annotations

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

# Project root when running from a source checkout: src/era5fetch/config.py -> three levels up
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def default_data_dir(root: Path | None = None) -> Path:
    """data/raw under the checkout, or under the working directory once installed."""
    root = root or PROJECT_ROOT
    if (root / "pyproject.toml").is_file() and (root / "src").is_dir():
        return root / "data" / "raw"
    return Path.cwd() / "data" / "raw"


class Settings(BaseSettings):
    debug: bool = Field(default=False, alias="ERA5FETCH_DEBUG")

    # ERA5 / Copernicus CDS
    cds_url: str = Field(default="https://cds.climate.copernicus.eu/api", alias="CDS_API_URL")
    cds_key: str = Field(default="", alias="CDS_API_KEY")

    # Output
    data_dir: Path = Field(default_factory=default_data_dir, alias="ERA5FETCH_DATA_DIR")

    # Years to download (inclusive)
    start_year: int = Field(default=2019, alias="ERA5FETCH_START_YEAR")
    end_year: int = Field(default=2020, alias="ERA5FETCH_END_YEAR")

    # Bounding box [North, West, South, East], roughly the continental US
    area_north: float = 50
    area_west: float = -130
    area_south: float = 24
    area_east: float = -65

    # Grid resolution in degrees
    grid_resolution: str = Field(default="1.0", alias="ERA5FETCH_GRID_RESOLUTION")

    # Variables
    single_level_variable: str = "2m_temperature"
    pressure_level_variable: str = "geopotential"
    pressure_level: int = 500  # hPa

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def _check_year_range(self):
        if self.start_year > self.end_year:
            raise ValueError(
                f"start_year ({self.start_year}) is after end_year ({self.end_year})"
            )
        return self

    @property
    def years(self) -> range:
        return range(self.start_year, self.end_year + 1)


settings = Settings()
