# aniline/assets/registry.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from aniline.shaders.handle import ShaderHandle
from aniline.shaders.imports import ImportRef
from aniline.shaders.processor import ShaderProcessor
from aniline.shaders.types import ProcessedShader, ShaderUnit


class ShaderRegistry:
    """
    Stores shader units by handle, plus the import references that resolve
    to them. Keeps both maps consistent: every registered import points at a
    stored unit.
    """

    def __init__(self) -> None:
        self._shaders: Dict[ShaderHandle, ShaderUnit] = {}
        self._import_handles: Dict[ImportRef, ShaderHandle] = {}
        self._processor: Optional[ShaderProcessor] = None

    @property
    def shaders(self) -> Mapping[ShaderHandle, ShaderUnit]:
        return MappingProxyType(self._shaders)

    @property
    def import_handles(self) -> Mapping[ImportRef, ShaderHandle]:
        return MappingProxyType(self._import_handles)

    def add(self, shader: ShaderUnit) -> ShaderHandle:
        """Register a unit under a fresh handle, and under its import path if it has one."""
        handle = ShaderHandle.new()
        self._shaders[handle] = shader
        if shader.import_path is not None:
            self._import_handles[shader.import_path] = handle
        return handle

    def set_import(self, import_ref: ImportRef, handle: ShaderHandle) -> None:
        if handle not in self._shaders:
            raise KeyError(f"Shader {handle} is not registered.")
        self._import_handles[import_ref] = handle

    def get(self, handle: ShaderHandle) -> Optional[ShaderUnit]:
        return self._shaders.get(handle)

    def handle_for(self, import_ref: ImportRef) -> Optional[ShaderHandle]:
        return self._import_handles.get(import_ref)

    def remove(self, handle: ShaderHandle) -> None:
        """Drop a unit and every import that resolved to it."""
        if handle not in self._shaders:
            raise KeyError(f"Shader {handle} is not registered.")
        del self._shaders[handle]
        stale = [ref for ref, h in self._import_handles.items() if h == handle]
        for ref in stale:
            del self._import_handles[ref]

    def process(
        self,
        handle: ShaderHandle,
        shader_defs: Iterable[str] = (),
        processor: Optional[ShaderProcessor] = None,
    ) -> ProcessedShader:
        shader = self._shaders.get(handle)
        if shader is None:
            raise KeyError(f"Shader {handle} is not registered.")
        if processor is None:
            if self._processor is None:
                self._processor = ShaderProcessor()
            processor = self._processor
        return processor.process(
            shader, shader_defs, self._shaders, self._import_handles
        )

    def __contains__(self, handle: ShaderHandle) -> bool:
        return handle in self._shaders

    def __len__(self) -> int:
        return len(self._shaders)

    def clear(self) -> None:
        """Clear all registered shaders (use with caution)."""
        self._shaders.clear()
        self._import_handles.clear()
