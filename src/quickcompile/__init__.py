from .compiler.driver import CompilerDriver
from .errors import (
    DuplicateExtensionError,
    InternalInconsistencyError,
    QuickCompileError,
    UnrecognizedExtensionError,
)
from .utils.config import ConfigManager, Preferences
from .utils.lang import Language, LanguageProfile, resolve_language
from .utils.state import CompileOutcome, CompileState

__all__ = [
    "CompileOutcome",
    "CompileState",
    "CompilerDriver",
    "ConfigManager",
    "DuplicateExtensionError",
    "InternalInconsistencyError",
    "Language",
    "LanguageProfile",
    "Preferences",
    "QuickCompileError",
    "UnrecognizedExtensionError",
    "resolve_language",
]
