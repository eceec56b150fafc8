# aniline/shaders/types.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from aniline.shaders.imports import ImportRef, shader_import_extractor

SPIRV_MAGIC = 0x07230203


class ShaderStage(str, Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"
    COMPUTE = "compute"


@dataclass(frozen=True, slots=True)
class WgslSource:
    text: str


@dataclass(frozen=True, slots=True)
class GlslSource:
    text: str
    stage: ShaderStage


@dataclass(frozen=True, slots=True)
class SpirVSource:
    data: bytes


ShaderSourceVariant = Union[WgslSource, GlslSource, SpirVSource]


@dataclass(frozen=True, slots=True)
class ShaderUnit:
    """
    An unprocessed shader. May still contain preprocessor directives.

    `imports` is extracted from `source` once, at construction.
    """

    source: ShaderSourceVariant
    import_path: Optional[ImportRef] = None
    imports: Tuple[ImportRef, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        imports = tuple(shader_import_extractor().get_imports(self.source))
        object.__setattr__(self, "imports", imports)

    @classmethod
    def from_wgsl(cls, text: str) -> ShaderUnit:
        return cls(WgslSource(text))

    @classmethod
    def from_glsl(cls, text: str, stage: ShaderStage) -> ShaderUnit:
        return cls(GlslSource(text, ShaderStage(stage)))

    @classmethod
    def from_spirv(cls, data: bytes) -> ShaderUnit:
        return cls(SpirVSource(bytes(data)))

    def with_import_path(self, import_path: Union[str, ImportRef]) -> ShaderUnit:
        """Return a copy importable under `import_path` (plain strings are custom imports)."""
        if not isinstance(import_path, ImportRef):
            import_path = ImportRef.custom(import_path)
        return replace(self, import_path=import_path)


@dataclass(frozen=True, slots=True)
class ProcessedWgsl:
    source: str

    def wgsl_source(self) -> Optional[str]:
        return self.source

    def glsl_source(self) -> Optional[str]:
        return None


@dataclass(frozen=True, slots=True)
class ProcessedGlsl:
    source: str
    stage: ShaderStage

    def wgsl_source(self) -> Optional[str]:
        return None

    def glsl_source(self) -> Optional[str]:
        return self.source


@dataclass(frozen=True, slots=True)
class ProcessedSpirV:
    data: bytes

    def wgsl_source(self) -> Optional[str]:
        return None

    def glsl_source(self) -> Optional[str]:
        return None

    def words(self) -> np.ndarray:
        """
        View the module as little-endian 32-bit words.
        Raises ValueError if the data is not a SPIR-V module.
        """
        if len(self.data) % 4 != 0:
            raise ValueError(
                f"SPIR-V data length must be a multiple of 4, got {len(self.data)}"
            )
        words = np.frombuffer(self.data, dtype="<u4")
        if words.size == 0 or int(words[0]) != SPIRV_MAGIC:
            raise ValueError("SPIR-V data does not start with the magic number")
        return words


ProcessedShader = Union[ProcessedWgsl, ProcessedGlsl, ProcessedSpirV]


def get_wgsl_source(processed: ProcessedShader) -> Optional[str]:
    return processed.wgsl_source()


def get_glsl_source(processed: ProcessedShader) -> Optional[str]:
    return processed.glsl_source()
