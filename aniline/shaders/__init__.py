from aniline.shaders.errors import (
    MismatchedImportFormatError,
    NotEnoughEndIfsError,
    ProcessShaderError,
    TooManyEndIfsError,
    UnresolvedImportError,
    UnsupportedDirectivesError,
    UnsupportedImportsError,
)
from aniline.shaders.handle import ShaderHandle, allocate_handle
from aniline.shaders.imports import (
    ImportKind,
    ImportRef,
    ShaderImportExtractor,
    shader_import_extractor,
)
from aniline.shaders.processor import ShaderProcessor
from aniline.shaders.types import (
    GlslSource,
    ProcessedGlsl,
    ProcessedShader,
    ProcessedSpirV,
    ProcessedWgsl,
    ShaderStage,
    ShaderUnit,
    SpirVSource,
    WgslSource,
    get_glsl_source,
    get_wgsl_source,
)

__all__ = [
    "ShaderUnit",
    "ShaderStage",
    "WgslSource",
    "GlslSource",
    "SpirVSource",
    "ProcessedShader",
    "ProcessedWgsl",
    "ProcessedGlsl",
    "ProcessedSpirV",
    "get_wgsl_source",
    "get_glsl_source",
    "ImportKind",
    "ImportRef",
    "ShaderImportExtractor",
    "shader_import_extractor",
    "ShaderHandle",
    "allocate_handle",
    "ShaderProcessor",
    "ProcessShaderError",
    "TooManyEndIfsError",
    "NotEnoughEndIfsError",
    "UnsupportedDirectivesError",
    "UnsupportedImportsError",
    "UnresolvedImportError",
    "MismatchedImportFormatError",
]
