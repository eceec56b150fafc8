# aniline/assets/importers/shader.py
from pathlib import Path
from typing import Optional

from aniline.assets.settings import ShaderLoaderSettings
from aniline.shaders.types import ShaderStage, ShaderUnit


class ShaderImporter:
    """
    Reads a shader file from disk into an unprocessed ShaderUnit.
    The dialect is chosen by file extension. Thread-safe.
    """

    def __init__(self, settings: Optional[ShaderLoaderSettings] = None) -> None:
        self.settings = settings or ShaderLoaderSettings()

    def glsl_stage(self, path: Path) -> Optional[ShaderStage]:
        suffixes = [s.lower() for s in path.suffixes]
        if not suffixes:
            return None
        stages = self.settings.glsl_stages
        if suffixes[-1] in stages:
            return stages[suffixes[-1]]
        # e.g. lighting.frag.glsl
        if suffixes[-1] == ".glsl" and len(suffixes) > 1 and suffixes[-2] in stages:
            return stages[suffixes[-2]]
        return None

    def import_file(self, path: Path) -> ShaderUnit:
        path = Path(path)
        ext = path.suffix.lower()

        if ext in self.settings.spirv_extensions:
            return ShaderUnit.from_spirv(path.read_bytes())

        if ext in self.settings.wgsl_extensions:
            return ShaderUnit.from_wgsl(
                path.read_text(encoding=self.settings.encoding)
            )

        stage = self.glsl_stage(path)
        if stage is None:
            raise ValueError(f"Cannot determine shader dialect for {path}")
        return ShaderUnit.from_glsl(
            path.read_text(encoding=self.settings.encoding), stage
        )
