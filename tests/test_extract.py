"""Tests for the extract command."""

import json

import pytest

from webpub_subjects.__main__ import main as cli_main
from webpub_subjects.extract import main

MANIFEST = {
    "metadata": {
        "title": "Dracula",
        "subject": [{"name": "Horror", "scheme": "BISAC", "code": "FIC015000"}, "Vampires"],
    }
}


def test_extract(write_manifest, tmp_path) -> None:
    path = write_manifest(MANIFEST)
    output_dir = tmp_path / "out"

    assert main([path, "--output-dir", str(output_dir)]) == 0
    assert (output_dir / "subjects.csv").exists()
    assert (output_dir / "summary.txt").exists()

    document = json.loads((output_dir / "subjects.json").read_text(encoding="utf-8"))
    assert document[path] == [{"name": "Horror", "scheme": "BISAC", "code": "FIC015000"}, {"name": "Vampires"}]

    summary = json.loads((output_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["subjects"]["total"] == 2
    assert summary["parse"]["subjects"] == 2


def test_extract_nothing_loaded(tmp_path) -> None:
    assert main([str(tmp_path / "missing.json"), "--output-dir", str(tmp_path / "out")]) == 1


def test_extract_strict(write_manifest, tmp_path) -> None:
    path = write_manifest({"metadata": {"subject": ["Horror", {"code": "X"}]}})
    output_dir = tmp_path / "out"
    assert main([path, "--output-dir", str(output_dir)]) == 0
    assert main([path, "--output-dir", str(output_dir), "--strict"]) == 1


def test_cli_extract_command(write_manifest, tmp_path) -> None:
    path = write_manifest(MANIFEST)
    assert cli_main(["extract", path, "--output-dir", str(tmp_path / "out")]) == 0
    assert (tmp_path / "out" / "subjects.csv").exists()


def test_cli_without_command_prints_help(capsys) -> None:
    assert cli_main([]) == 0
    assert "extract" in capsys.readouterr().out


def test_cli_unknown_command(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["nope"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
