import asyncio
import logging
import os
from typing import Callable, List, Optional

from ..ui.output import OutputChannel
from ..utils.config import ConfigManager, Preferences
from ..utils.lang import LanguageProfile, resolve_language
from ..utils.state import CompileOutcome, CompileState

logger = logging.getLogger(__name__)

ERROR_HEADER = "Errors while compiling:\n"

Resolver = Callable[[str, Optional[Preferences]], LanguageProfile]


def get_bin_save_location(
    source_path: str, profile: LanguageProfile, preferences: Preferences
) -> str:
    """
    Where the compiled binary goes.
    Interpreted languages produce no binary, so the source itself is returned.
    """
    if profile.skip_compile:
        return source_path
    bin_file_name = f"{os.path.basename(source_path)}.bin"
    if preferences.save_location:
        return os.path.join(preferences.save_location, bin_file_name)
    return f"{source_path}.bin"


def get_flags(
    profile: LanguageProfile, source_path: str, preferences: Preferences
) -> List[str]:
    """Full argument vector passed to the compiler (executable excluded)."""
    args = list(profile.args)
    # An unset preference splits to [""]
    if args and args[0] == "":
        args = []
    output = get_bin_save_location(source_path, profile, preferences)
    return [source_path, "-o", output, *args]


class CompilerDriver:
    def __init__(
        self,
        sink: OutputChannel,
        config_manager: Optional[ConfigManager] = None,
        resolver: Resolver = resolve_language,
    ):
        self.sink = sink
        # Use provided config or load default
        self.config = config_manager if config_manager else ConfigManager()
        self.resolver = resolver

    async def compile(self, source_path: str) -> CompileOutcome:
        """
        Compile a source file once.

        Interpreted languages are skipped and count as a success. Compiler
        failures are reported through the sink and returned as a failed
        outcome; only resolution errors are raised.
        """
        logger.info("Compilation started: %s", source_path)
        self.sink.hide()

        preferences = self.config.preferences()
        profile = self.resolver(source_path, preferences)
        if profile.skip_compile:
            logger.info("Compilation skipped for %s source", profile.name.value)
            return CompileOutcome(CompileState.SKIPPED)

        flags = get_flags(profile, source_path, preferences)
        command = (profile.compiler, *flags)
        logger.debug("Compiling with command %s", command)

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            return self._fail(command, f"Compiler '{profile.compiler}' not found.\n", None)
        except OSError as e:
            return self._fail(command, f"Compiler '{profile.compiler}' could not be started: {e.strerror or e}\n", None)

        # Drain stderr until the pipe closes, then collect the exit code
        chunks = []
        try:
            while True:
                chunk = await process.stderr.read(4096)
                if not chunk:
                    break
                chunks.append(chunk)
            returncode = await process.wait()
        except asyncio.CancelledError:
            # Cancelled compiles take their compiler down with them
            if process.returncode is None:
                try:
                    process.kill()
                except ProcessLookupError:
                    pass
            await process.wait()
            raise
        stderr = b"".join(chunks).decode("utf-8", errors="replace")

        if returncode == 1 or stderr != "":
            return self._fail(command, stderr, returncode)

        logger.info("Compilation passed")
        return CompileOutcome(CompileState.SUCCEEDED, "", command, returncode)

    def _fail(self, command, stderr: str, returncode: Optional[int]) -> CompileOutcome:
        self.sink.append(ERROR_HEADER + stderr)
        self.sink.show()
        logger.error("Compilation failed (exit code %s)", returncode)
        return CompileOutcome(CompileState.FAILED, stderr, tuple(command), returncode)
