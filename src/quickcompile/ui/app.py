from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header

from ..compiler.driver import CompilerDriver
from ..errors import QuickCompileError
from ..utils.config import ConfigManager
from ..utils.state import CompileOutcome
from ..utils.watcher import FileWatcher
from .widgets import OutputPanel, StatusBar

# User Palette
C_BG = "#EBEEEE"
C_TEXT = "#191A1A"
C_ACCENT1 = "#45d3ee" # Cyan
C_ACCENT2 = "#9FBFC5" # Muted Blue


class QuickCompileApp(App):
    """Compiles the watched file on every save and shows compiler errors."""

    CSS = f"""
    Screen {{
        background: {C_BG};
        color: {C_TEXT};
    }}

    #output-scroll {{
        height: 1fr;
        border: solid {C_ACCENT2};
        margin: 1 1;
    }}

    #output-panel {{ color: #a80000; display: none; margin: 0 1; }}

    #status-bar {{ height: 1; padding: 0 1; }}

    Footer {{ background: {C_TEXT}; color: {C_ACCENT1}; }}
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "recompile", "Recompile", show=True),
    ]

    def __init__(self, source_file: str, config_manager: Optional[ConfigManager] = None):
        super().__init__()
        self.source_file = source_file
        self.output_panel = OutputPanel()
        self.status_bar = StatusBar()
        self.driver = CompilerDriver(self.output_panel, config_manager)
        self.watcher = FileWatcher()
        self.last_outcome: Optional[CompileOutcome] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="output-scroll"):
            yield self.output_panel
        yield self.status_bar
        yield Footer()

    def on_mount(self) -> None:
        self.title = "quickcompile"
        self.status_bar.set_status(file=Path(self.source_file).name)
        self.action_recompile()
        self.watcher.start_watching(
            self.source_file,
            lambda _path: self.call_from_thread(self.action_recompile),
        )

    def action_recompile(self) -> None:
        # A newer compile cancels the one still running
        self.run_worker(self._compile(), exclusive=True)

    async def _compile(self) -> None:
        self.status_bar.set_status(status="compiling…")
        self.output_panel.clear()
        try:
            outcome = await self.driver.compile(self.source_file)
        except QuickCompileError as e:
            self.output_panel.append(str(e))
            self.output_panel.show()
            self.status_bar.set_status(status="error")
            return
        self.last_outcome = outcome
        self.status_bar.set_status(status=outcome.state.value)

    def on_unmount(self) -> None:
        self.watcher.stop_watching()


def run_tui(source_file: str, config_manager: Optional[ConfigManager] = None):
    app = QuickCompileApp(source_file, config_manager)
    app.run()
