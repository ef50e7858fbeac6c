from .driver import CompilerDriver, ERROR_HEADER, get_bin_save_location, get_flags

__all__ = ["CompilerDriver", "ERROR_HEADER", "get_bin_save_location", "get_flags"]
