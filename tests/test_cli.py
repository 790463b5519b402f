"""Tests for the dodgerace CLI — argument parsing, simulate and doctor."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dodgerace.config.loader import load_settings
from dodgerace.core.doctor import run_doctor
from dodgerace.ui.cli.main import build_parser, main


class TestCli:
    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_parser_simulate(self):
        args = build_parser().parse_args(["simulate", "--rounds", "3", "--pilot", "stay", "--seed", "4"])
        assert args.rounds == 3
        assert args.pilot == "stay"
        assert args.seed == 4

    def test_simulate_prints_summary(self, capsys):
        code = main(["simulate", "--rounds", "2", "--seed", "1", "--duration", "0.5", "--pilot", "stay"])
        out = capsys.readouterr().out
        assert code == 0
        assert "[sim] seed=1 won" in out
        assert "[sim] 2/2 won" in out

    def test_doctor(self, capsys):
        main(["doctor"])
        out = capsys.readouterr().out
        assert "pygame" in out
        assert "checks passing" in out

    def test_simulate_bad_duration_reports_error(self, capsys):
        code = main(["simulate", "--duration", "0"])
        out = capsys.readouterr().out
        assert code == 1
        assert out.startswith("[sim] duration_ms must be positive")

    def test_doctor_bad_settings_reports_error(self, capsys):
        code = main(["doctor", "--fps", "0"])
        assert code == 1
        assert capsys.readouterr().out.startswith("[doctor] fps must be positive")

    def test_doctor_window_counts_hud_strip(self, capsys):
        """A window whose in-round playfield is shorter than the car fails the window check."""
        code = main(["doctor", "--height", "70"])
        out = capsys.readouterr().out
        assert code == 1
        assert "[FAIL] window" in out

    def test_doctor_window_ok_for_default_size(self):
        checks = {c.name: c for c in run_doctor(load_settings())}
        assert checks["window"].ok
