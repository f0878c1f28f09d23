"""
Tests for the command line entry point.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from graphite_check.cli import build_parser, config_from_args, main
from graphite_check.comparators import Comparator
from graphite_check.core import Outcome, OutcomeKind


class TestParser:
    """Tests for argument parsing."""

    def test_flags_map_to_config(self) -> None:
        """Test that every flag reaches the configuration."""
        args = build_parser().parse_args([
            "-t", "servers.$.load",
            "-s", "graphite:8080",
            "-w", "4",
            "-c", "8",
            "-r", "3",
            "-n", "Load",
            "-a", "120",
            "--host-sub", "-",
            "-C", "lt",
            "-S", "15",
            "--timeout", "3",
        ])

        config = config_from_args(args)

        assert config.target == "servers.$.load"
        assert config.server == "graphite:8080"
        assert config.warning == 4.0
        assert config.critical == 8.0
        assert config.reset_on_change == 3
        assert config.name == "Load"
        assert config.allowed_age == 120
        assert config.hostname_sub == "-"
        assert config.comparator is Comparator.LESS_THAN
        assert config.timespan == 15
        assert config.timeout == 3.0

    def test_config_file_with_override(self, tmp_path: Path) -> None:
        """Test that flags override the YAML defaults file."""
        config_file = tmp_path / "check.yaml"
        config_file.write_text("server: graphite:8080\ntarget: a.b\ncritical: 8\n")

        args = build_parser().parse_args(["--config", str(config_file), "-c", "20"])
        config = config_from_args(args)

        assert config.server == "graphite:8080"
        assert config.critical == 20.0


class TestMain:
    """Tests for main."""

    def test_missing_server(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that missing options are reported as unknown."""
        exit_code = main(["-t", "a.b"])

        assert exit_code == 3
        assert capsys.readouterr().out == "GraphiteData UNKNOWN: No graphite server provided\n"

    def test_invalid_comparator(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an invalid comparator is reported as unknown."""
        exit_code = main(["-t", "a.b", "-s", "g:80", "-C", "eq"])

        assert exit_code == 3
        assert "Unknown comparator eq. Valid options: {gt, lt}." in capsys.readouterr().out

    def test_invalid_number(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a bad numeric option is reported as unknown."""
        exit_code = main(["-t", "a.b", "-s", "g:80", "-w", "lots"])

        assert exit_code == 3
        assert capsys.readouterr().out.startswith("GraphiteData UNKNOWN: Invalid configuration")

    def test_missing_config_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing defaults file is reported as unknown."""
        exit_code = main(["--config", "/nonexistent/check.yaml"])

        assert exit_code == 3
        assert "Configuration file not found" in capsys.readouterr().out

    @pytest.mark.parametrize("kind,code", [
        (OutcomeKind.OK, 0),
        (OutcomeKind.WARNING, 1),
        (OutcomeKind.CRITICAL, 2),
    ])
    def test_exit_codes(
        self,
        kind: OutcomeKind,
        code: int,
        capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that the outcome kind decides the exit code."""
        with patch("graphite_check.cli.GraphiteDataCheck") as mock_check:
            mock_check.return_value.run.return_value = Outcome(kind, "message")

            exit_code = main(["-t", "a.b", "-s", "g:80"])

        assert exit_code == code
        assert capsys.readouterr().out == f"GraphiteData {kind.name}: message\n"

    @pytest.mark.parametrize("argv", [
        ["-t", "a.b", "-s", "g:80", "--bogus"],
        ["-t", "a.b", "-s"],
        ["-t", "a.b", "-s", "g:80", "--log-level", "LOUD"],
    ])
    def test_bad_command_line_is_unknown(
        self,
        argv: list[str],
        capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that argument errors print one UNKNOWN line instead of exiting."""
        exit_code = main(argv)

        captured = capsys.readouterr()
        assert exit_code == 3
        assert captured.out.startswith("GraphiteData UNKNOWN: Invalid arguments: ")
        assert captured.out.count("\n") == 1

    def test_unreadable_config_file(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a config path that cannot be read is reported as unknown."""
        exit_code = main(["--config", str(tmp_path)])

        assert exit_code == 3
        assert capsys.readouterr().out.startswith(
            "GraphiteData UNKNOWN: Cannot read configuration file"
        )
