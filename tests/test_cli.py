"""
Tests for the rdoc command line.
"""

import json
from pathlib import Path

import pytest

from rdoc.cli import main


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_ast_command(tmp_path, capsys, rust_grammar):
    src = _write(tmp_path / "lib.rs", "/// Adds numbers.\n/// Fast.\npub fn add() {}\n")

    assert main(["ast", str(src), "--check"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["type"] == "Document"
    (paragraph,) = data["children"]
    assert [c["value"] for c in paragraph["children"]] == ["Adds numbers.", "Fast."]


def test_ast_missing_file(tmp_path, capsys):
    assert main(["ast", str(tmp_path / "nope.rs")]) == 2
    assert "File not found" in capsys.readouterr().err


def test_ast_unsupported_extension(tmp_path, capsys):
    src = _write(tmp_path / "notes.txt", "/// hi\n")
    assert main(["ast", str(src)]) == 2
    assert "Unsupported extension '.txt'" in capsys.readouterr().err


def test_scan_command(tmp_path, capsys, rust_grammar):
    _write(tmp_path / "src" / "lib.rs", "//! Crate.\n\n/// One.\nfn one() {}\n\n/// Two.\n/// More.\nfn two() {}\n")
    _write(tmp_path / "src" / "plain.rs", "// nothing\nfn f() {}\n")
    _write(tmp_path / "target" / "gen.rs", "/// Generated.\n")

    assert main(["scan", str(tmp_path)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {
        "files": [
            {"path": "src/lib.rs", "paragraphs": 3, "strs": 4},
            {"path": "src/plain.rs", "paragraphs": 0, "strs": 0},
        ]
    }


def test_scan_respects_config(tmp_path, capsys, rust_grammar):
    _write(tmp_path / "rdoc.yaml", "exclude: ['skip/']\n")
    _write(tmp_path / "keep" / "a.rs", "/// A.\n")
    _write(tmp_path / "skip" / "b.rs", "/// B.\n")

    assert main(["scan", str(tmp_path)]) == 0
    paths = [f["path"] for f in json.loads(capsys.readouterr().out)["files"]]
    assert paths == ["keep/a.rs"]


def test_scan_bad_config(tmp_path, capsys):
    _write(tmp_path / "rdoc.yaml", "schema_version: 7\n")
    assert main(["scan", str(tmp_path)]) == 2
    assert "unsupported config schema" in capsys.readouterr().err


def test_list_extensions(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["list", "extensions"]) == 0
    assert json.loads(capsys.readouterr().out) == {"extensions": [".rs"]}


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("rdoc ")
