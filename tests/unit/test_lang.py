"""Unit tests for language resolution."""
import pytest
from quickcompile.errors import (
    DuplicateExtensionError,
    InternalInconsistencyError,
    UnrecognizedExtensionError,
)
from quickcompile.utils import lang
from quickcompile.utils.config import Preferences
from quickcompile.utils.lang import (
    Language,
    build_extension_map,
    check_unsupported,
    detect_language,
    is_supported,
    resolve_language,
    SUPPORTED_EXTENSIONS,
)


class TestLanguageDetection:
    """Test detect_language correctly identifies source file languages."""

    def test_known_extensions(self):
        assert detect_language("main.cpp") == Language.CPP
        assert detect_language("main.c") == Language.C
        assert detect_language("sol.py") == Language.PYTHON
        assert detect_language("a.rs") == Language.RUST

    def test_unknown_extension(self):
        assert detect_language("main.java") is None
        assert detect_language("b.xyz") is None
        assert detect_language("Makefile") is None

    def test_full_paths(self):
        assert detect_language("/home/user/project/src/main.rs") == Language.RUST
        assert detect_language("/home/user/v1.2/main.cpp") == Language.CPP

    def test_is_supported(self):
        assert is_supported("main.cpp")
        assert is_supported("sol.py")
        assert not is_supported("main.cc")
        assert not is_supported("main.java")

    def test_supported_extensions(self):
        assert SUPPORTED_EXTENSIONS == ["c", "cpp", "py", "rs"]

    def test_check_unsupported(self):
        assert check_unsupported("main.cpp") is None
        message = check_unsupported("notes.txt")
        assert message.startswith("Unsupported file extension")
        assert "cpp" in message and "rs" in message


class TestExtensionMap:
    """The extension table must not map one extension to two languages."""

    def test_inverts_table(self):
        assert build_extension_map({"cpp": "cpp", "rust": "rs"}) == {"cpp": "cpp", "rs": "rust"}

    def test_duplicate_extension_rejected(self):
        with pytest.raises(DuplicateExtensionError):
            build_extension_map({"cpp": "h", "c": "h"})


class TestResolveLanguage:
    """Test LanguageProfile construction."""

    def test_cpp_profile(self):
        profile = resolve_language("main.cpp")
        assert profile.name == Language.CPP
        assert profile.compiler == "g++"
        assert profile.skip_compile is False
        assert profile.args == ()

    def test_c_and_rust_compilers(self):
        assert resolve_language("b.c").compiler == "gcc"
        assert resolve_language("a.rs").compiler == "rustc"

    def test_python_skips_compile(self):
        profile = resolve_language("sol.py")
        assert profile.name == Language.PYTHON
        assert profile.skip_compile is True

    def test_args_from_preferences(self):
        prefs = Preferences(language_args={"cpp": ["-O2", "-Wall"], "rust": ["-O"]})
        assert resolve_language("main.cpp", prefs).args == ("-O2", "-Wall")
        assert resolve_language("a.rs", prefs).args == ("-O",)
        assert resolve_language("b.c", prefs).args == ()

    def test_unrecognized_extension(self):
        with pytest.raises(UnrecognizedExtensionError) as exc_info:
            resolve_language("b.xyz")
        assert exc_info.value.source_path == "b.xyz"
        assert "cpp" in exc_info.value.supported

    def test_mapped_language_without_profile(self, monkeypatch):
        monkeypatch.setattr(lang, "_EXT_MAP", {"go": "go"})
        with pytest.raises(InternalInconsistencyError):
            resolve_language("main.go")
