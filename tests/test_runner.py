import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

from app.checks.results import PingResult, Skipped, Success
from app.config import settings
from app.models import TargetFile
from app.runner import main, run_once


class RunnerTests(unittest.TestCase):
    def test_run_once_pings_configured_urls(self) -> None:
        response = Mock(status_code=200, text="pong")
        with patch("app.runner.load_targets", return_value=TargetFile(urls=["https://b.test"])), patch.object(
            settings, "KEEPALIVE_URLS", ("https://a.test",)
        ), patch.object(settings, "KEEPALIVE_DRY_RUN", False), patch.object(
            settings, "KEEPALIVE_TIMEOUT_SECONDS", 4.0
        ), patch(
            "app.checks.http_check.requests.get", return_value=response
        ) as mock_get:
            results = run_once()

        self.assertEqual([r.url for r in results], ["https://a.test", "https://b.test"])
        self.assertEqual(mock_get.call_args_list[0].kwargs, {"timeout": 4.0})
        self.assertEqual(results[0].outcome, Success(code=200, body="pong"))

    def test_run_once_uses_configured_dry_run(self) -> None:
        with patch(
            "app.runner.load_targets",
            return_value=TargetFile(urls=["https://a.test"], dry_run=True),
        ), patch.object(settings, "KEEPALIVE_URLS", ()), patch(
            "app.checks.http_check.requests.get"
        ) as mock_get:
            results = run_once()

        mock_get.assert_not_called()
        self.assertEqual(results, [PingResult(url="https://a.test", outcome=Skipped())])

    def test_explicit_dry_run_overrides_config(self) -> None:
        response = Mock(status_code=200, text="")
        with patch(
            "app.runner.load_targets",
            return_value=TargetFile(urls=["https://a.test"], dry_run=True),
        ), patch.object(settings, "KEEPALIVE_URLS", ()), patch(
            "app.checks.http_check.requests.get", return_value=response
        ) as mock_get:
            results = run_once(dry_run=False)

        mock_get.assert_called_once()
        self.assertEqual(results[0].status, 200)

    def test_nothing_configured_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as td, patch.object(
            settings, "KEEPALIVE_TARGETS_PATH", str(Path(td) / "targets.yml")
        ), patch.object(settings, "KEEPALIVE_URLS", ()):
            self.assertIsNone(run_once())

    def test_main_exit_codes(self) -> None:
        with patch("app.runner.run_once", return_value=None):
            self.assertEqual(main([]), 1)

        with patch(
            "app.runner.run_once",
            return_value=[PingResult(url="https://a.test", outcome=Skipped())],
        ) as run_mock:
            self.assertEqual(main(["--dry-run"]), 0)

        run_mock.assert_called_once_with(dry_run=True)

    def test_main_can_force_dry_run_off(self) -> None:
        with patch(
            "app.runner.run_once",
            return_value=[PingResult(url="https://a.test", outcome=Skipped())],
        ) as run_mock:
            self.assertEqual(main(["--no-dry-run"]), 0)

        run_mock.assert_called_once_with(dry_run=False)

    def test_main_without_flag_defers_to_config(self) -> None:
        with patch("app.runner.run_once", return_value=None) as run_mock:
            main([])

        run_mock.assert_called_once_with(dry_run=None)


if __name__ == "__main__":
    unittest.main()
