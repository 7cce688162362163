"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from items_manager import __version__
from items_manager.__main__ import main, parse_args


class TestArguments:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.check is None
        assert args.export is None
        assert args.nested is False
        assert args.profile == "default"

    def test_export_requires_check(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--export", "out.lua"])

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--version"])
        assert __version__ in capsys.readouterr().out


@pytest.mark.usefixtures("restore_logging")
class TestCheck:
    """Test headless import and export."""

    def test_check_prints_summary(self, app_settings, sample_items_file: Path, capsys) -> None:
        code = main(["--check", str(sample_items_file), "--profile", app_settings.profile])

        assert code == 0
        out = capsys.readouterr().out
        assert "3 items" in out
        assert "categories: item, weapon" in out

    def test_check_and_export(
        self, app_settings, sample_items_file: Path, tmp_path: Path, capsys
    ) -> None:
        out_path = tmp_path / "exported.lua"
        code = main(
            [
                "--check", str(sample_items_file),
                "--export", str(out_path),
                "--profile", app_settings.profile,
            ]
        )

        assert code == 0
        assert f"exported to {out_path}" in capsys.readouterr().out
        assert out_path.read_text(encoding="utf-8").startswith("QBShared = QBShared or {};")

    def test_check_file_without_items(self, app_settings, tmp_path: Path, capsys) -> None:
        empty = tmp_path / "empty.lua"
        empty.write_text("-- nothing here\n", encoding="utf-8")

        code = main(["--check", str(empty), "--profile", app_settings.profile])

        assert code == 0
        out = capsys.readouterr().out
        assert "0 items" in out
        assert "categories: -" in out

    def test_check_missing_file(self, app_settings, tmp_path: Path) -> None:
        code = main(["--check", str(tmp_path / "missing.lua"), "--profile", app_settings.profile])
        assert code == 1
