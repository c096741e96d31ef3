from enum import Enum


class DatasetKind(str, Enum):
    SINGLE_LEVEL = "reanalysis-era5-single-levels"
    PRESSURE_LEVEL = "reanalysis-era5-pressure-levels"

    @property
    def dataset_name(self) -> str:
        return self.value

    @property
    def has_levels(self) -> bool:
        return self is DatasetKind.PRESSURE_LEVEL
