class QuickCompileError(Exception):
    pass


class UnrecognizedExtensionError(QuickCompileError):
    def __init__(self, source_path: str, supported: list[str]):
        super().__init__(
            f"Unrecognized extension for {source_path}. "
            f"Only these types are valid: {', '.join(supported)}"
        )
        self.source_path = source_path
        self.supported = supported


class InternalInconsistencyError(QuickCompileError):
    pass


class DuplicateExtensionError(QuickCompileError):
    pass
