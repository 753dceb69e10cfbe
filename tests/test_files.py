from pathlib import Path

import pytest

from src.amiibo.exceptions import DumpReadError, DumpWriteError
from src.utils.files import find_dump_files, load_dump, output_path_for, save_nfc_file


def test_find_dump_files_recurses_and_filters(tmp_path):
    (tmp_path / "Zelda").mkdir()
    (tmp_path / "Zelda" / "Link.bin").write_bytes(b"\x00")
    (tmp_path / "Mario.bin").write_bytes(b"\x00")
    (tmp_path / "notes.txt").write_text("skip")
    (tmp_path / "folder.bin").mkdir()

    files = find_dump_files(tmp_path)

    assert files == [tmp_path / "Mario.bin", tmp_path / "Zelda" / "Link.bin"]


def test_find_dump_files_missing_directory(tmp_path):
    with pytest.raises(DumpReadError):
        find_dump_files(tmp_path / "missing")


def test_load_dump(tmp_path):
    path = tmp_path / "a.bin"
    path.write_bytes(b"\x01\x02")
    assert load_dump(path) == b"\x01\x02"


def test_load_dump_missing_file(tmp_path):
    with pytest.raises(DumpReadError):
        load_dump(tmp_path / "missing.bin")


def test_output_path_mirrors_input_tree():
    path = output_path_for(Path("Amiibo Bins/Zelda/Link.bin"), "Amiibo Bins", "output")
    assert path == Path("output/Zelda/Link.nfc")


def test_output_path_only_changes_suffix():
    path = output_path_for(Path("in/bin.stuff/Link.bin"), "in", "out")
    assert path == Path("out/bin.stuff/Link.nfc")


def test_save_nfc_file_creates_directories(tmp_path):
    path = tmp_path / "a" / "b" / "Link.nfc"
    save_nfc_file(path, "Filetype: Flipper NFC device")
    assert path.read_text(encoding="utf-8") == "Filetype: Flipper NFC device"


def test_save_nfc_file_unwritable_destination(tmp_path):
    (tmp_path / "blocked").write_text("")
    with pytest.raises(DumpWriteError):
        save_nfc_file(tmp_path / "blocked" / "Link.nfc", "content")
