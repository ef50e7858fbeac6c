"""
Diagnostics channels — where compiler error text is shown to the user.

Any object with hide(), show(), append(text) and clear() can be handed to
the CompilerDriver. The console channel prints through Rich; the Textual
OutputPanel lives in widgets.py.
"""
from __future__ import annotations

import sys
from typing import List, Protocol, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class OutputChannel(Protocol):
    def hide(self) -> None: ...

    def show(self) -> None: ...

    def append(self, text: str) -> None: ...

    def clear(self) -> None: ...


class ConsoleOutputChannel:
    """Buffers appended text and prints it as a panel when shown."""

    def __init__(self, name: str = "quickcompile", console: Console | None = None) -> None:
        self.name = name
        self.console = console if console is not None else Console(file=sys.stderr)
        self.visible = False
        self._buffer: List[str] = []

    def hide(self) -> None:
        self.visible = False
        self._buffer.clear()

    def show(self) -> None:
        self.visible = True
        if not self._buffer:
            return
        body = Text("".join(self._buffer), style="red")
        self.console.print(Panel(body, title=self.name, border_style="red"))
        self._buffer.clear()

    def append(self, text: str) -> None:
        self._buffer.append(text)

    def clear(self) -> None:
        self._buffer.clear()


class MemoryOutputChannel:
    """Keeps everything in memory. Handy for headless callers and tests."""

    def __init__(self) -> None:
        self.visible = False
        self.text = ""
        self.calls: List[Tuple[str, ...]] = []

    def hide(self) -> None:
        self.calls.append(("hide",))
        self.visible = False

    def show(self) -> None:
        self.calls.append(("show",))
        self.visible = True

    def append(self, text: str) -> None:
        self.calls.append(("append", text))
        self.text += text

    def clear(self) -> None:
        self.calls.append(("clear",))
        self.text = ""
