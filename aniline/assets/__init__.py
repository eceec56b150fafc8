from aniline.assets.importers.shader import ShaderImporter
from aniline.assets.registry import ShaderRegistry
from aniline.assets.server import ShaderServer
from aniline.assets.settings import ShaderLoaderSettings

__all__ = [
    "ShaderServer",
    "ShaderRegistry",
    "ShaderImporter",
    "ShaderLoaderSettings",
]
