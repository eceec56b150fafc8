from aniline.shaders import (
    ProcessShaderError,
    ShaderHandle,
    ShaderProcessor,
    ShaderStage,
    ShaderUnit,
)

__all__ = [
    "ShaderUnit",
    "ShaderStage",
    "ShaderHandle",
    "ShaderProcessor",
    "ProcessShaderError",
]
