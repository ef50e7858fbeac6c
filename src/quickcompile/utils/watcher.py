import time
from pathlib import Path
from typing import Callable, Optional
from watchdog.observers import Observer
from watchdog.events import FileSystemEvent, FileSystemEventHandler


class SourceSaveHandler(FileSystemEventHandler):
    """
    Reports saves of a single source file.

    Editors save either in place (modified), by recreating the file (created)
    or by writing a temp file and renaming it over the source (moved), so all
    three count as a save when they land on the target.
    """
    def __init__(self, target_file: str, callback: Callable[[str], None], debounce_seconds: float = 0.5):
        self.target_file = str(Path(target_file).resolve())
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self.last_triggered = 0.0

    def _saved_path(self, event: FileSystemEvent) -> Optional[str]:
        if event.is_directory:
            return None
        if event.event_type == "moved":
            return getattr(event, "dest_path", None)
        if event.event_type in ("modified", "created"):
            return event.src_path
        return None

    def on_any_event(self, event: FileSystemEvent):
        path = self._saved_path(event)
        if not path or str(Path(path).resolve()) != self.target_file:
            return
        now = time.time()
        if now - self.last_triggered <= self.debounce_seconds:
            return
        self.last_triggered = now
        self.callback(self.target_file)


class FileWatcher:
    """Watches the directory holding one source file on a watchdog thread."""

    def __init__(self):
        self.observer = Observer()
        self.watch = None

    def start_watching(self, file_path: str, callback: Callable[[str], None]):
        path = Path(file_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Cannot watch non-existent file: {file_path}")

        handler = SourceSaveHandler(str(path), callback)
        self.watch = self.observer.schedule(handler, str(path.parent), recursive=False)
        self.observer.start()

    def stop_watching(self):
        if self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
