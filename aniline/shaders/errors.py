# aniline/shaders/errors.py
from __future__ import annotations

from aniline.shaders.imports import ImportRef


class ProcessShaderError(ValueError):
    """Base class for every failure raised while processing a shader."""


class TooManyEndIfsError(ProcessShaderError):
    def __init__(self) -> None:
        super().__init__(
            "Too many '#endif' lines. Each endif should be preceded by an if statement."
        )


class NotEnoughEndIfsError(ProcessShaderError):
    def __init__(self) -> None:
        super().__init__(
            "Not enough '#endif' lines. Each if statement should be followed by an endif statement."
        )


class UnsupportedDirectivesError(ProcessShaderError):
    def __init__(self) -> None:
        super().__init__("This shader's format does not support shader defs.")


class UnsupportedImportsError(ProcessShaderError):
    def __init__(self) -> None:
        super().__init__("This shader's format does not support imports.")


class UnresolvedImportError(ProcessShaderError):
    def __init__(self, import_ref: ImportRef) -> None:
        super().__init__(f"Unresolved import: {import_ref}.")
        self.import_ref = import_ref


class MismatchedImportFormatError(ProcessShaderError):
    def __init__(self, import_ref: ImportRef) -> None:
        super().__init__(
            f"The shader import {import_ref} does not match the source file type."
        )
        self.import_ref = import_ref
