"""
Unit tests for the Conformer command line.
"""

from __future__ import annotations

import pytest

from conformer.cli.__main__ import main
from conformer.config import get_settings


class TestGenerateCommand:
    def test_generate_all(self, tasks_schema_path, capsys) -> None:
        assert main(["generate", str(tasks_schema_path)]) == 0
        out = capsys.readouterr().out
        assert "# TaskThing (task_thing)" in out
        assert "# BlankThing (blank_thing)" in out
        assert "MARK: Add the variable columns" in out

    def test_generate_single_artifact(self, tasks_schema_path, capsys) -> None:
        exit_code = main(
            ["generate", str(tasks_schema_path), "--table", "BlankThing", "--artifact", "ddl"]
        )
        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.startswith("CREATE TABLE IF NOT EXISTS blank_thing (")
        assert "task_thing" not in out

    def test_no_if_not_exists(self, tasks_schema_path, capsys) -> None:
        main(
            [
                "generate",
                str(tasks_schema_path),
                "--table",
                "TaskThing",
                "--artifact",
                "ddl",
                "--no-if-not-exists",
            ]
        )
        assert capsys.readouterr().out.startswith("CREATE TABLE task_thing (")

    def test_unknown_table(self, tasks_schema_path, capsys) -> None:
        assert main(["generate", str(tasks_schema_path), "--table", "Nope"]) == 1
        assert "Nope" in capsys.readouterr().err

    def test_missing_schema_file(self, tmp_path, capsys) -> None:
        assert main(["generate", str(tmp_path / "missing.yml")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_type_overrides_file(
        self, tasks_schema_path, tmp_path, monkeypatch, capsys
    ) -> None:
        monkeypatch.setenv("CONFORMER_TYPE_OVERRIDES_FILE", str(tmp_path / "types.yml"))
        get_settings.cache_clear()
        assert main(["generate", str(tasks_schema_path)]) == 1
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "CREATE TABLE" not in captured.out


class TestOtherCommands:
    def test_list(self, tasks_schema_path, capsys) -> None:
        assert main(["list", str(tasks_schema_path)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "TaskThing\ttask_thing",
            "BlankThing\tblank_thing",
            "BrokenThing\tbroken_thing",
        ]

    def test_types(self, capsys) -> None:
        assert main(["types"]) == 0
        out = capsys.readouterr().out
        assert "String\ttext" in out
        assert "Date\tdatetime" in out

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
