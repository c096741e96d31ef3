from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from era5fetch.models.enums import DatasetKind

MONTHS = [f"{m:02d}" for m in range(1, 13)]
DAYS = [f"{d:02d}" for d in range(1, 32)]
HOURS = [f"{h:02d}:00" for h in range(24)]


class FetchConfig(BaseModel):
    """Fixed part of every request: product, format, extent, resolution and time ranges."""

    product_type: str = "reanalysis"
    data_format: str = "netcdf"
    area: list[float] = Field(
        default=[50, -130, 24, -65], min_length=4, max_length=4,
        description="Bounding box [north, west, south, east]",
    )
    grid: list[str] = Field(default=["1.0", "1.0"], min_length=2, max_length=2)
    months: list[str] = Field(default_factory=lambda: list(MONTHS))
    days: list[str] = Field(default_factory=lambda: list(DAYS))
    hours: list[str] = Field(default_factory=lambda: list(HOURS))

    @classmethod
    def from_settings(cls, settings) -> FetchConfig:
        return cls(
            area=[
                settings.area_north,
                settings.area_west,
                settings.area_south,
                settings.area_east,
            ],
            grid=[settings.grid_resolution, settings.grid_resolution],
        )


class RequestSpec(BaseModel):
    dataset_kind: DatasetKind
    product_type: str = "reanalysis"
    format: str = "netcdf"
    variable: str
    year: int
    months: list[str]
    days: list[str]
    hours: list[str]
    area: list[float]
    grid: list[str]
    pressure_level: int | None = Field(default=None, description="hPa, pressure-level data only")

    @model_validator(mode="after")
    def _check_level(self):
        if self.dataset_kind.has_levels and self.pressure_level is None:
            raise ValueError("pressure-level requests need a pressure_level")
        if not self.dataset_kind.has_levels and self.pressure_level is not None:
            raise ValueError("single-level requests cannot carry a pressure_level")
        return self

    @classmethod
    def build(
        cls,
        kind: DatasetKind,
        year: int,
        variable: str,
        config: FetchConfig,
        level: int | None = None,
    ) -> RequestSpec:
        return cls(
            dataset_kind=kind,
            product_type=config.product_type,
            format=config.data_format,
            variable=variable,
            year=year,
            months=list(config.months),
            days=list(config.days),
            hours=list(config.hours),
            area=list(config.area),
            grid=list(config.grid),
            pressure_level=level,
        )

    @property
    def dataset_name(self) -> str:
        return self.dataset_kind.dataset_name

    def to_cds_request(self) -> dict:
        """Serialise to the request mapping accepted by ``cdsapi.Client.retrieve``."""
        request = {
            "product_type": self.product_type,
            "format": self.format,
            "variable": self.variable,
            "year": str(self.year),
            "month": list(self.months),
            "day": list(self.days),
            "time": list(self.hours),
            "area": list(self.area),
            "grid": list(self.grid),
        }
        if self.pressure_level is not None:
            request["pressure_level"] = str(self.pressure_level)
        return request
