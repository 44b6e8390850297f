from __future__ import annotations
import shutil

import pytest

from twfscodec import (
    KEY_SALT_LIST, RecoveryConfig, ChecksumMismatch, InvalidArchivePath, IoFailure, NoCandidateMatched,
)
from twfswf.api import canonical_name, list_archive, read_archive, write_names
from twfswf.cli.list import main as list_main

from conftest import build_archive, make_header

NAME = "dt_00028.dat"

@pytest.fixture
def archive(tmp_path, two_entries):
    p = tmp_path / NAME
    p.write_bytes(build_archive(NAME, KEY_SALT_LIST[3], make_header(2), two_entries))
    return p

@pytest.fixture(autouse=True)
def _no_env(monkeypatch):
    monkeypatch.delenv("TWFS_SALT", raising=False)
    monkeypatch.delenv("TWFS_SALTS_FILE", raising=False)

def test_cli_list_recovers_salt_and_prints_names(archive, capsys):
    rc = list_main([str(archive)])
    assert rc == 0
    assert capsys.readouterr().out == "a.txt\nb.bin\n"

def test_cli_list_output_file(archive, tmp_path, capsys):
    out = tmp_path / "out" / "names.txt"
    out.parent.mkdir()
    out.write_text("stale content that is longer than the listing\n" * 3, encoding="utf-8")
    rc = list_main([str(archive), "--salt", KEY_SALT_LIST[3], "-o", str(out)])
    assert rc == 0
    assert out.read_text(encoding="utf-8") == "a.txt\nb.bin\n"
    assert capsys.readouterr().out == ""

def test_explicit_wrong_salt_fails_without_search(archive):
    with pytest.raises(ChecksumMismatch):
        list_archive(archive, salt=KEY_SALT_LIST[0])
    assert list_main([str(archive), "--salt", KEY_SALT_LIST[0]]) == 1

def test_salt_from_env(archive, monkeypatch, capsys):
    monkeypatch.setenv("TWFS_SALT", KEY_SALT_LIST[3])
    assert list_main([str(archive)]) == 0
    assert capsys.readouterr().out == "a.txt\nb.bin\n"

def test_salts_file_without_match_fails(archive, tmp_path):
    salts = tmp_path / "salts.txt"
    salts.write_text("# candidates\nnope-1\n\nnope-2\n", encoding="utf-8")
    with pytest.raises(NoCandidateMatched) as ei:
        list_archive(archive, config=RecoveryConfig.from_file(salts))
    assert ei.value.attempts == 2
    assert list_main([str(archive), "--salts-file", str(salts)]) == 1

def test_salts_file_from_env(archive, tmp_path, monkeypatch, capsys):
    salts = tmp_path / "salts.txt"
    salts.write_text(f"other\n{KEY_SALT_LIST[3]}\n", encoding="utf-8")
    monkeypatch.setenv("TWFS_SALTS_FILE", str(salts))
    assert list_main([str(archive)]) == 0
    assert capsys.readouterr().out == "a.txt\nb.bin\n"

def test_missing_archive_is_io_failure(tmp_path):
    with pytest.raises(IoFailure):
        list_archive(tmp_path / "nope.dat")
    assert list_main([str(tmp_path / "nope.dat")]) == 1

def test_relocated_archive_keeps_its_keys(archive, tmp_path):
    other = tmp_path / "elsewhere" / "deeper"
    other.mkdir(parents=True)
    moved = shutil.copy(archive, other / NAME)
    assert list_archive(moved) == ["a.txt", "b.bin"]
    renamed = shutil.copy(archive, other / "dt_99999.dat")
    with pytest.raises(NoCandidateMatched):
        list_archive(renamed)

def test_canonical_name():
    assert canonical_name("/data/game/dt_00028.dat") == "dt_00028.dat"
    assert canonical_name("dt_00028.dat") == "dt_00028.dat"
    for bad in ("", "/", "..", "a/.."):
        with pytest.raises(InvalidArchivePath):
            canonical_name(bad)

def test_read_archive_on_open_source(archive):
    with open(archive, "rb") as f:
        header, entries, salt = read_archive(f, NAME)
    assert salt == KEY_SALT_LIST[3]
    assert [e.flags for e in entries] == [0, 1]
    assert entries[1].is_compressed

def test_write_names_stdout(capsys):
    write_names(["x", "y/z.txt"])
    assert capsys.readouterr().out == "x\ny/z.txt\n"

def test_cli_requires_archive_argument():
    with pytest.raises(SystemExit) as ei:
        list_main([])
    assert ei.value.code == 2

def test_read_archive_with_none_defaults(archive):
    with open(archive, "rb") as f:
        _, entries, salt = read_archive(f, NAME, None, None, None, None)
    assert salt == KEY_SALT_LIST[3]
    assert [e.name for e in entries] == ["a.txt", "b.bin"]
