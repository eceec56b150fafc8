# aniline/assets/settings.py
from dataclasses import dataclass, field
from typing import Dict, Tuple

from aniline.shaders.types import ShaderStage


def _default_glsl_stages() -> Dict[str, ShaderStage]:
    return {
        ".vert": ShaderStage.VERTEX,
        ".frag": ShaderStage.FRAGMENT,
        ".comp": ShaderStage.COMPUTE,
    }


@dataclass(slots=True)
class ShaderLoaderSettings:
    """
    Controls how shader files on disk map to shader units.
    """

    wgsl_extensions: Tuple[str, ...] = (".wgsl",)
    glsl_stages: Dict[str, ShaderStage] = field(default_factory=_default_glsl_stages)
    spirv_extensions: Tuple[str, ...] = (".spv",)
    encoding: str = "utf-8"

    # Follow `#import "path"` directives when loading through a ShaderServer.
    load_dependencies: bool = True
