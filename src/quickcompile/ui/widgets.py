"""
Custom Widgets
==============
Exposes: OutputPanel, StatusBar

OutputPanel is the diagnostics channel inside the TUI: the compiler driver
hides it when a compile starts and shows it again with the error text when
the compile fails.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class OutputPanel(Static):
    """
    Compiler error output.
    ID: #output-panel
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(id="output-panel", **kwargs)
        self.text: str = ""

    def hide(self) -> None:
        self.display = False

    def show(self) -> None:
        self.display = True

    def append(self, text: str) -> None:
        self.text += text
        self.update(Text(self.text))

    def clear(self) -> None:
        self.text = ""
        self.update(Text(""))


class StatusBar(Static):
    """
    Bottom bar — current file and compile status.
    ID: #status-bar
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(id="status-bar", **kwargs)
        self._file: str = ""
        self._status: str = "idle"

    @property
    def status(self) -> str:
        return self._status

    def set_status(
        self,
        *,
        file: str | None = None,
        status: str | None = None,
    ) -> None:
        if file is not None:
            self._file = file
        if status is not None:
            self._status = status
        self._render_bar()

    def _render_bar(self) -> None:
        parts = []
        if self._file:
            parts.append(f"📄 {self._file}")
        parts.append(f"● {self._status}")
        self.update("  │  ".join(parts))
