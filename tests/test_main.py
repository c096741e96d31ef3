"""Entry point tests - the CLI takes no arguments and propagates failures."""

from unittest.mock import patch

import pytest

import era5fetch.main as main_mod
from era5fetch.errors import NetworkError
from era5fetch.pipelines.runner import DownloadSummary


class TestMain:
    def test_runs_configured_years(self):
        with patch.object(main_mod, "run", return_value=DownloadSummary()) as run:
            assert main_mod.main() == 0
        run.assert_called_once_with()

    def test_errors_propagate(self):
        with patch.object(main_mod, "run", side_effect=NetworkError("unreachable")):
            with pytest.raises(NetworkError):
                main_mod.main()
