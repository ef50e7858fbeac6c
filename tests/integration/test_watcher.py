import threading
import time

from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from quickcompile.utils.watcher import FileWatcher, SourceSaveHandler


def _handler(tmp_path, debounce_seconds=0.5):
    src = tmp_path / "main.cpp"
    src.write_text("")
    calls = []
    return str(src.resolve()), calls, SourceSaveHandler(str(src), calls.append, debounce_seconds)


def test_handler_debounces(tmp_path):
    src, calls, handler = _handler(tmp_path)
    handler.on_any_event(FileModifiedEvent(src))
    handler.on_any_event(FileModifiedEvent(src))
    assert calls == [src]


def test_handler_ignores_other_files_and_directories(tmp_path):
    src, calls, handler = _handler(tmp_path)
    handler.on_any_event(FileModifiedEvent(str(tmp_path / "other.cpp")))
    handler.on_any_event(DirModifiedEvent(str(tmp_path)))
    handler.on_any_event(FileDeletedEvent(src))
    assert calls == []


def test_rename_over_source_counts_as_save(tmp_path):
    src, calls, handler = _handler(tmp_path, debounce_seconds=0)
    handler.on_any_event(FileMovedEvent(str(tmp_path / ".main.cpp.swp"), src))
    handler.on_any_event(FileMovedEvent(src, str(tmp_path / "backup.cpp")))
    assert calls == [src]


def test_recreated_source_counts_as_save(tmp_path):
    src, calls, handler = _handler(tmp_path)
    handler.on_any_event(FileCreatedEvent(src))
    assert calls == [src]


def test_full_watcher_loop(tmp_path):
    src = tmp_path / "watch_me.cpp"
    src.write_text("int square(int x) { return x * x; }\n")
    saved = threading.Event()

    watcher = FileWatcher()
    watcher.start_watching(str(src), lambda _path: saved.set())
    try:
        time.sleep(0.5)
        with open(src, "a") as f:
            f.write("// Minor change to trigger watchdog\n")
        assert saved.wait(timeout=5)
    finally:
        watcher.stop_watching()
