from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from lib_log_media.adapters import files as files_module
from lib_log_media.adapters.files import FileLockMedium, FilePutMedium, ensure_exists, lock_and_write
from lib_log_media.domain import EncodingFailure, FileLockFailure, FileSetupFailure, FileWriteFailure, SetupRegistry
from tests.os_markers import POSIX_ONLY


def _lines(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def _lock_is_free(path: Path) -> bool:
    import fcntl

    with open(path, "ab") as probe:
        try:
            fcntl.flock(probe.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            return False
        fcntl.flock(probe.fileno(), fcntl.LOCK_UN)
        return True


class _FailingHandle:
    """Wrap a real handle but fail every write like a full disk."""

    def __init__(self, real) -> None:
        self.real = real
        self.closed = False

    def fileno(self) -> int:
        return self.real.fileno()

    def write(self, data: bytes) -> int:
        raise OSError(28, "No space left on device")

    def flush(self) -> None:
        self.real.flush()

    def close(self) -> None:
        self.closed = True
        self.real.close()


@POSIX_ONLY
def test_locked_file_writes_one_json_object_per_line_in_call_order(tmp_path: Path, message_factory, setup_registry) -> None:
    target = tmp_path / "t.log"
    medium = FileLockMedium(target, setup_registry=setup_registry)

    medium.write(message_factory(text="first"))
    medium.write(message_factory(text="second", id="msg-002"))

    records = _lines(target)
    assert [record["message"] for record in records] == ["first", "second"]
    assert target.read_bytes().endswith(b"\n")


@POSIX_ONLY
def test_lock_is_released_after_each_write(tmp_path: Path, message_factory, setup_registry) -> None:
    target = tmp_path / "t.log"
    medium = FileLockMedium(target, setup_registry=setup_registry)

    medium.write(message_factory(text="first"))
    assert _lock_is_free(target)
    medium.write(message_factory(text="second"))
    assert _lock_is_free(target)


@POSIX_ONLY
def test_lock_is_released_when_the_write_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "full.log"
    target.touch()
    handles: list[_FailingHandle] = []

    def _open(path, mode):
        handle = _FailingHandle(open(path, mode))
        handles.append(handle)
        return handle

    monkeypatch.setattr(files_module, "open", _open, raising=False)

    with pytest.raises(FileWriteFailure, match="No space left on device") as info:
        lock_and_write(target, b"{}")

    assert info.value.path == str(target)
    assert handles[0].closed
    monkeypatch.undo()
    assert _lock_is_free(target)


@POSIX_ONLY
def test_concurrent_locked_writers_never_interleave(tmp_path: Path, message_factory, setup_registry) -> None:
    target = tmp_path / "shared.log"
    medium = FileLockMedium(target, setup_registry=setup_registry)
    padding = "x" * 4096

    def _writer(worker: int) -> None:
        for index in range(25):
            medium.write(message_factory(text=f"{worker}-{index}", context={"padding": padding}))

    threads = [threading.Thread(target=_writer, args=(worker,)) for worker in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    records = _lines(target)
    assert len(records) == 100
    assert {record["message"] for record in records} == {f"{w}-{i}" for w in range(4) for i in range(25)}


@POSIX_ONLY
def test_locked_file_reports_open_failure_as_lock_failure(tmp_path: Path, message_factory, setup_registry) -> None:
    target = tmp_path / "gone.log"
    medium = FileLockMedium(target, setup_registry=setup_registry)
    target.unlink()
    target.mkdir()

    with pytest.raises(FileLockFailure, match="Failed to open log file"):
        medium.write(message_factory())


def test_put_file_appends_lines(tmp_path: Path, message_factory, setup_registry) -> None:
    target = tmp_path / "put.log"
    medium = FilePutMedium(target, setup_registry=setup_registry)

    medium.write(message_factory(text="hello log"))
    medium.write(message_factory(text="world log"))

    assert [record["message"] for record in _lines(target)] == ["hello log", "world log"]


def test_put_file_reports_write_failure(tmp_path: Path, message_factory, setup_registry) -> None:
    directory = tmp_path / "logs"
    target = directory / "app.log"
    medium = FilePutMedium(target, setup_registry=setup_registry)
    target.unlink()
    directory.rmdir()

    with pytest.raises(FileWriteFailure) as info:
        medium.write(message_factory())

    assert info.value.path == str(target)


@pytest.mark.parametrize("medium_type", [FilePutMedium, FileLockMedium])
def test_unencodable_message_is_rejected_before_writing(tmp_path: Path, message_factory, setup_registry, medium_type) -> None:
    target = tmp_path / "app.log"
    medium = medium_type(target, setup_registry=setup_registry)

    with pytest.raises(EncodingFailure):
        medium.write(message_factory(context={"handle": object()}))

    assert target.read_bytes() == b""


@pytest.mark.parametrize("medium_type", [FilePutMedium, FileLockMedium])
def test_parent_that_is_a_file_fails_at_construction(tmp_path: Path, medium_type) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("plain file")

    with pytest.raises(FileSetupFailure, match="Parent path is not a directory") as info:
        medium_type(blocker / "app.log", setup_registry=SetupRegistry())

    assert info.value.path == str(blocker)


@pytest.mark.parametrize("medium_type", [FilePutMedium, FileLockMedium])
def test_unwritable_parent_fails_at_construction(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, medium_type) -> None:
    monkeypatch.setattr(files_module.os, "access", lambda path, mode: False)

    with pytest.raises(FileSetupFailure, match="Parent directory is not writable") as info:
        medium_type(tmp_path / "app.log", setup_registry=SetupRegistry())

    assert info.value.path == str(tmp_path)
    assert not (tmp_path / "app.log").exists()


def test_missing_parent_directories_are_created(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "er" / "app.log"

    ensure_exists(target)

    assert target.is_file()
    assert target.read_bytes() == b""


def test_existing_file_is_left_untouched(tmp_path: Path) -> None:
    target = tmp_path / "app.log"
    target.write_text("kept\n")

    ensure_exists(target)

    assert target.read_text() == "kept\n"


def test_directory_as_target_fails(tmp_path: Path) -> None:
    with pytest.raises(FileSetupFailure, match="Target path is a directory"):
        ensure_exists(tmp_path)


def test_uncreatable_parent_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x")

    with pytest.raises(FileSetupFailure):
        ensure_exists(blocker / "sub" / "app.log")


def test_setup_runs_once_per_path_and_kind(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[Path] = []
    real = files_module.ensure_exists

    def _counting(path):
        calls.append(Path(path))
        return real(path)

    monkeypatch.setattr(files_module, "ensure_exists", _counting)
    registry = SetupRegistry()

    FileLockMedium(tmp_path / "a.log", setup_registry=registry)
    FileLockMedium(tmp_path / "a.log", setup_registry=registry)
    FilePutMedium(tmp_path / "a.log", setup_registry=registry)
    FileLockMedium(tmp_path / "b.log", setup_registry=registry)

    assert calls == [tmp_path / "a.log", tmp_path / "a.log", tmp_path / "b.log"]


def test_medium_name_identifies_the_path(tmp_path: Path, setup_registry) -> None:
    medium = FilePutMedium(tmp_path / "app.log", setup_registry=setup_registry)
    assert medium.name == f"file {tmp_path / 'app.log'}"
