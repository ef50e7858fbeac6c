import argparse
import asyncio
import logging
import os
import sys
import time

from rich.logging import RichHandler

from .compiler.driver import CompilerDriver
from .engine import CompileEngine
from .errors import QuickCompileError
from .ui.app import run_tui
from .ui.output import ConsoleOutputChannel
from .utils.config import ConfigManager
from .utils.lang import check_unsupported
from .utils.state import CompileOutcome

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(description="quickcompile: compile a source file with the right compiler")
    parser.add_argument("file", help="C, C++, Rust or Python source file")
    parser.add_argument("--watch", action="store_true", help="Recompile every time the file is saved")
    parser.add_argument("--tui", action="store_true", help="Open the terminal UI")
    parser.add_argument("--save-location", metavar="DIR", help="Store compiled binaries in DIR (saved as preference)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log compiler commands")
    return parser


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )


def _report(outcome: CompileOutcome):
    if outcome.skipped:
        print("Compilation skipped")
    elif outcome.ok:
        print("Compilation passed")


def _watch(abs_path: str, config: ConfigManager):
    engine = CompileEngine(abs_path, ConsoleOutputChannel(), config)
    engine.on_update_callback = _report
    try:
        engine.start()
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        engine.stop()


def run():
    parser = _build_parser()
    args = parser.parse_args()
    _setup_logging(args.verbose)

    # Resolve to absolute path immediately
    abs_path = os.path.abspath(args.file)

    if not os.path.exists(abs_path):
        print(f"Error: File not found: {abs_path}")
        sys.exit(1)

    message = check_unsupported(abs_path)
    if message:
        print(f"Error: {message}")
        sys.exit(1)

    config = ConfigManager()
    if args.save_location is not None:
        config.set("save_location", os.path.abspath(args.save_location) if args.save_location else "")

    if args.tui:
        run_tui(abs_path, config)
        return

    try:
        if args.watch:
            _watch(abs_path, config)
            return
        driver = CompilerDriver(ConsoleOutputChannel(), config)
        outcome = asyncio.run(driver.compile(abs_path))
    except QuickCompileError as e:
        print(f"Error: {e}")
        sys.exit(1)

    _report(outcome)
    sys.exit(0 if outcome.ok else 1)

if __name__ == "__main__":
    run()
