"""Unit tests for Probe ABC.

Tests for the abstract Probe base class and its shared algorithm.
"""

from unittest.mock import patch

import pytest
from bagpack.models.package import PackageManager, PackageStatus
from bagpack.probes.base import CommandFailure, ParseFailure, Probe, non_blank
from bagpack.utils.shell import NonSuccessExit


class ConcreteProbe(Probe):
    """Concrete implementation for testing the ABC."""

    default_executable = "fakepm"

    def __init__(self, installed: dict[str, str], latest: dict[str, str]) -> None:
        super().__init__()
        self._installed = installed
        self._latest = latest
        self.outdated_calls = 0

    @property
    def manager(self) -> PackageManager:
        return PackageManager.PIP

    def list_installed(self) -> dict[str, str]:
        return dict(self._installed)

    def list_outdated(self) -> dict[str, str]:
        self.outdated_calls += 1
        return dict(self._latest)


class TestProbe:
    """Tests for Probe ABC."""

    def test_records_follow_installed_order(self) -> None:
        """Records are emitted in installed-map order."""
        probe = ConcreteProbe({"b": "1.0", "a": "2.0", "c": "3.0"}, {})
        assert [r.name for r in probe.collect()] == ["b", "a", "c"]

    def test_distinct_latest_is_outdated(self) -> None:
        """Only a latest version different from current marks outdated."""
        probe = ConcreteProbe({"a": "1.0", "b": "2.0"}, {"a": "1.1", "b": "2.0", "zzz": "9"})

        records = {r.name: r for r in probe.collect()}

        assert records["a"].status == PackageStatus.OUTDATED
        assert records["a"].latest_version == "1.1"
        assert records["b"].status == PackageStatus.CURRENT
        assert "zzz" not in records

    def test_records_carry_probe_manager(self) -> None:
        """Every record is tagged with the probe's manager."""
        probe = ConcreteProbe({"a": "1.0"}, {})
        assert all(r.manager == PackageManager.PIP for r in probe.collect())

    def test_installed_at_left_unset(self) -> None:
        """No probe supplies install timestamps."""
        probe = ConcreteProbe({"a": "1.0"}, {"a": "2.0"})
        assert probe.collect()[0].installed_at is None

    def test_empty_installed_skips_outdated(self) -> None:
        """Outdated lookup is not run when nothing is installed."""
        probe = ConcreteProbe({}, {"a": "1.0"})

        assert probe.collect() == []
        assert probe.outdated_calls == 0

    def test_is_available_checks_executable(self) -> None:
        """is_available looks up the configured executable."""
        probe = ConcreteProbe({}, {})
        with patch("bagpack.probes.base.command_exists", return_value=True) as mock_exists:
            assert probe.is_available() is True
        mock_exists.assert_called_once_with("fakepm")

    def test_run_wraps_process_errors(self) -> None:
        """Process-level errors become CommandFailure with the same message."""
        probe = ConcreteProbe({}, {})
        error = NonSuccessExit("fakepm list", 3, "bad")
        with patch("bagpack.probes.base.run_command", side_effect=error):
            with pytest.raises(CommandFailure) as exc_info:
                probe._run("list")

        assert exc_info.value.error is error
        assert str(exc_info.value) == str(error)

    def test_load_json_raises_parse_failure(self) -> None:
        """Invalid JSON raises ParseFailure naming the command."""
        probe = ConcreteProbe({}, {})
        with pytest.raises(ParseFailure, match="Failed to parse fakepm list JSON"):
            probe._load_json("{", "fakepm list")


class TestNonBlank:
    """Tests for non_blank helper."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 3, ["1.0"]])
    def test_rejects_missing_values(self, value: object) -> None:
        """Blank strings and non-strings are treated as missing."""
        assert non_blank(value) is None

    def test_strips_surrounding_whitespace(self) -> None:
        """Visible content is returned stripped."""
        assert non_blank(" 1.2.3 ") == "1.2.3"
