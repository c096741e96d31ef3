"""era5fetch entry point.

Downloads the configured ERA5 variables for the configured years into
``data/raw``. Takes no arguments; configuration comes from the environment
or ``.env`` (see ``era5fetch.config``). CDS credentials are read from
``CDS_API_URL``/``CDS_API_KEY`` or, when unset, from ``~/.cdsapirc``.

Requests can queue on the CDS side for a long time; progress is visible at
https://cds.climate.copernicus.eu/requests.
"""

import logging
import sys

from era5fetch.config import settings
from era5fetch.pipelines.runner import run


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stdout,
    )


def main() -> int:
    configure_logging()
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
