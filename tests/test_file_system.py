import logging
import os

import pytest

from seika import file_system


def test_write_then_read_appends_newline(tmp_path):
    target = tmp_path / "out.txt"
    file_system.write_to_file(target, "hello")
    assert file_system.read_file_contents(target) == b"hello\n"


def test_file_size_matches_contents(tmp_path):
    target = tmp_path / "sized.bin"
    target.write_bytes(b"abcdef")
    assert file_system.get_file_size(target) == len(file_system.read_file_contents(target))


def test_get_file_size_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_system.get_file_size(tmp_path / "missing")


def test_read_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_system.read_file_contents(tmp_path / "missing")


def test_read_without_raw_strips_carriage_returns(tmp_path):
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"a\r\nb\r\n")
    assert file_system.read_file_contents_without_raw(target) == "a\nb\n"


def test_read_without_raw_keeps_plain_text(tmp_path):
    target = tmp_path / "lf.txt"
    target.write_bytes(b"line one\nline two")
    assert file_system.read_file_contents_without_raw(target) == "line one\nline two"


def test_does_file_exist(tmp_path):
    target = tmp_path / "exists.txt"
    target.write_text("x")
    assert file_system.does_file_exist(target) is True
    assert file_system.does_file_exist(tmp_path / "nope.txt") is False
    assert file_system.does_file_exist(tmp_path) is False


def test_does_dir_exist(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    assert file_system.does_dir_exist(tmp_path) is True
    assert file_system.does_dir_exist(target) is False
    assert file_system.does_dir_exist(tmp_path / "nowhere") is False


def test_chdir_to_same_directory_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert file_system.chdir(os.getcwd()) is False


def test_chdir_changes_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sub = tmp_path / "sub"
    sub.mkdir()
    assert file_system.chdir(str(sub)) is True
    assert os.path.samefile(file_system.get_cwd(), sub)


def test_chdir_to_missing_directory_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert file_system.chdir(str(tmp_path / "missing")) is False
    assert os.path.samefile(file_system.get_cwd(), tmp_path)


def test_print_cwd_logs_directory(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    with caplog.at_level(logging.INFO, logger="seika.file_system"):
        file_system.print_cwd()
    assert os.getcwd() in caplog.text