"""
Language detection utility — determines the language profile from file extension.
This module is the single source of truth for language routing throughout quickcompile.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from ..errors import (
    DuplicateExtensionError,
    InternalInconsistencyError,
    UnrecognizedExtensionError,
)
from .config import Preferences


class Language(str, Enum):
    CPP = "cpp"
    C = "c"
    PYTHON = "python"
    RUST = "rust"


@dataclass(frozen=True)
class LanguageProfile:
    """How to build (or skip building) one source file."""
    name: Language
    compiler: str
    args: Tuple[str, ...] = ()
    skip_compile: bool = False


# Extension configured for each language
EXTENSIONS: Dict[str, str] = {
    "cpp": "cpp",
    "c": "c",
    "python": "py",
    "rust": "rs",
}

# Fixed executable and skip-compile flag per language
_COMPILERS: Dict[Language, Tuple[str, bool]] = {
    Language.CPP: ("g++", False),
    Language.C: ("gcc", False),
    Language.PYTHON: ("python", True),
    Language.RUST: ("rustc", False),
}


def build_extension_map(extensions: Mapping[str, str]) -> Dict[str, str]:
    """
    Invert the language -> extension table.
    Two languages claiming the same extension is a configuration error.
    """
    ext_map: Dict[str, str] = {}
    for lang, ext in extensions.items():
        if ext in ext_map:
            raise DuplicateExtensionError(
                f"Extension '{ext}' is mapped to both '{ext_map[ext]}' and '{lang}'"
            )
        ext_map[ext] = lang
    return ext_map


_EXT_MAP = build_extension_map(EXTENSIONS)

SUPPORTED_EXTENSIONS = sorted(_EXT_MAP.keys())


def _extension(file_path: str) -> str:
    return Path(file_path).suffix[1:]


def detect_language(file_path: str) -> Optional[Language]:
    """Detect language from file extension, None when unsupported."""
    lang_name = _EXT_MAP.get(_extension(file_path))
    if lang_name is None:
        return None
    try:
        return Language(lang_name)
    except ValueError:
        return None


def is_supported(file_path: str) -> bool:
    """Return True if the file extension is supported."""
    return _extension(file_path) in _EXT_MAP


def check_unsupported(file_path: str) -> Optional[str]:
    """Return the message shown to the user when the file cannot be handled."""
    if is_supported(file_path):
        return None
    return (
        "Unsupported file extension. Only these types are valid: "
        + ", ".join(SUPPORTED_EXTENSIONS)
    )


def resolve_language(
    source_path: str, preferences: Optional[Preferences] = None
) -> LanguageProfile:
    """
    Build the LanguageProfile for a source file.

    Raises UnrecognizedExtensionError when the extension is not configured and
    InternalInconsistencyError when a configured language has no profile.
    """
    lang_name = _EXT_MAP.get(_extension(source_path))
    if lang_name is None:
        raise UnrecognizedExtensionError(source_path, SUPPORTED_EXTENSIONS)

    try:
        language = Language(lang_name)
        compiler, skip_compile = _COMPILERS[language]
    except (ValueError, KeyError):
        raise InternalInconsistencyError(
            f"Language '{lang_name}' has no compiler profile"
        ) from None

    prefs = preferences if preferences is not None else Preferences()
    return LanguageProfile(
        name=language,
        compiler=compiler,
        args=tuple(prefs.args_for(language.value)),
        skip_compile=skip_compile,
    )
