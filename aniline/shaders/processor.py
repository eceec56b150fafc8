from __future__ import annotations

import logging
import re
from typing import FrozenSet, Iterable, List, Mapping

from aniline.shaders.errors import (
    MismatchedImportFormatError,
    NotEnoughEndIfsError,
    TooManyEndIfsError,
    UnresolvedImportError,
    UnsupportedDirectivesError,
    UnsupportedImportsError,
)
from aniline.shaders.handle import ShaderHandle
from aniline.shaders.imports import ImportRef, shader_import_extractor, split_lines
from aniline.shaders.types import (
    GlslSource,
    ProcessedGlsl,
    ProcessedShader,
    ProcessedSpirV,
    ProcessedWgsl,
    ShaderUnit,
    SpirVSource,
    WgslSource,
)

logger = logging.getLogger(__name__)


class ShaderProcessor:
    """
    Resolves `#ifdef`/`#ifndef`/`#else`/`#endif` blocks against a set of
    shader defs and inlines `#import`ed units.

    The processor only reads the registries it is given, so one instance can
    be shared between threads as long as the registries are not mutated
    during a call.
    """

    def __init__(self) -> None:
        self.ifdef_regex = re.compile(r"^\s*#\s*ifdef\s*(\w+)")
        self.ifndef_regex = re.compile(r"^\s*#\s*ifndef\s*(\w+)")
        self.else_regex = re.compile(r"^\s*#\s*else")
        self.endif_regex = re.compile(r"^\s*#\s*endif")

    def process(
        self,
        shader: ShaderUnit,
        shader_defs: Iterable[str],
        shaders: Mapping[ShaderHandle, ShaderUnit],
        import_handles: Mapping[ImportRef, ShaderHandle],
    ) -> ProcessedShader:
        defs = frozenset(shader_defs)
        return self._process(shader, defs, shaders, import_handles)

    def _process(
        self,
        shader: ShaderUnit,
        defs: FrozenSet[str],
        shaders: Mapping[ShaderHandle, ShaderUnit],
        import_handles: Mapping[ImportRef, ShaderHandle],
    ) -> ProcessedShader:
        source = shader.source
        if isinstance(source, SpirVSource):
            if defs:
                raise UnsupportedDirectivesError()
            return ProcessedSpirV(source.data)

        extractor = shader_import_extractor()
        scopes = [True]
        output: List[str] = []

        for line in split_lines(source.text):
            cap = self.ifdef_regex.match(line)
            if cap is not None:
                scopes.append(scopes[-1] and cap.group(1) in defs)
                continue

            cap = self.ifndef_regex.match(line)
            if cap is not None:
                scopes.append(scopes[-1] and cap.group(1) not in defs)
                continue

            if self.else_regex.match(line):
                parent = scopes[-2] if len(scopes) > 1 else True
                scopes[-1] = parent and not scopes[-1]
                continue

            if self.endif_regex.match(line):
                scopes.pop()
                if not scopes:
                    raise TooManyEndIfsError()
                continue

            import_ref = extractor.match_import(line)
            if import_ref is not None:
                # Resolved and spliced whatever the current scope.
                output.append(
                    self._apply_import(shader, import_ref, defs, shaders, import_handles)
                )
                continue

            if scopes[-1]:
                output.append(line)
                output.append("\n")

        if len(scopes) != 1:
            raise NotEnoughEndIfsError()

        processed = "".join(output)
        if isinstance(source, WgslSource):
            return ProcessedWgsl(processed)
        return ProcessedGlsl(processed, source.stage)

    def _apply_import(
        self,
        shader: ShaderUnit,
        import_ref: ImportRef,
        defs: FrozenSet[str],
        shaders: Mapping[ShaderHandle, ShaderUnit],
        import_handles: Mapping[ImportRef, ShaderHandle],
    ) -> str:
        handle = import_handles.get(import_ref)
        imported = shaders.get(handle) if handle is not None else None
        if imported is None:
            raise UnresolvedImportError(import_ref)

        logger.debug("Inlining import %s (%s)", import_ref, handle)
        processed = self._process(imported, defs, shaders, import_handles)

        source = shader.source
        if isinstance(source, WgslSource):
            if not isinstance(processed, ProcessedWgsl):
                raise MismatchedImportFormatError(import_ref)
            return processed.source
        if isinstance(source, GlslSource):
            if not isinstance(processed, ProcessedGlsl):
                raise MismatchedImportFormatError(import_ref)
            return processed.source
        # SPIR-V returns before any line is scanned.
        raise UnsupportedImportsError()
