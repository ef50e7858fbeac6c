import asyncio
import logging
from typing import Callable, Optional

from .compiler.driver import CompilerDriver
from .ui.output import OutputChannel
from .utils.config import ConfigManager
from .utils.state import CompileOutcome
from .utils.watcher import FileWatcher

logger = logging.getLogger(__name__)


class CompileEngine:
    """Recompiles a source file every time it is saved."""

    def __init__(
        self,
        source_file: str,
        sink: OutputChannel,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.source_path = source_file
        self.driver = CompilerDriver(sink, config_manager)
        self.watcher = FileWatcher()
        self.on_update_callback: Optional[Callable[[CompileOutcome], None]] = None
        self.last_outcome: Optional[CompileOutcome] = None

    def start(self):
        self.refresh()
        self.watcher.start_watching(self.source_path, self._on_file_saved)

    def stop(self):
        self.watcher.stop_watching()

    def _on_file_saved(self, path: str):
        logger.info("%s saved, recompiling", path)
        self.refresh()

    def refresh(self) -> CompileOutcome:
        # Runs on the watchdog thread for saves, which has no event loop of its own
        outcome = asyncio.run(self.driver.compile(self.source_path))
        self.last_outcome = outcome
        if self.on_update_callback:
            self.on_update_callback(outcome)
        return outcome
