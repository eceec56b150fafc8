# aniline/assets/server.py
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from aniline.assets.importers.shader import ShaderImporter
from aniline.assets.registry import ShaderRegistry
from aniline.assets.settings import ShaderLoaderSettings
from aniline.shaders.handle import ShaderHandle
from aniline.shaders.imports import ImportKind, ImportRef
from aniline.shaders.processor import ShaderProcessor
from aniline.shaders.types import ProcessedShader

logger = logging.getLogger(__name__)


class ShaderServer:
    """
    Loads shader files below `asset_root` into a ShaderRegistry.

    Each file is registered under `#import "<path>"` with its path relative
    to the root, so asset-path imports resolve without further setup.
    """

    def __init__(
        self, asset_root: Path, settings: Optional[ShaderLoaderSettings] = None
    ) -> None:
        self.root = Path(asset_root)
        self.settings = settings or ShaderLoaderSettings()
        self.registry = ShaderRegistry()
        self.processor = ShaderProcessor()

        self._importer = ShaderImporter(self.settings)
        self._handles: Dict[str, ShaderHandle] = {}  # Path -> Handle

    def load(self, path: str, import_path: Optional[str] = None) -> ShaderHandle:
        """
        Load a shader file, returning its handle. Loading the same path twice
        returns the same handle.
        """
        if path in self._handles:
            return self._handles[path]

        full_path = self.root / path
        try:
            shader = self._importer.import_file(full_path)
        except (OSError, ValueError) as e:
            logger.error("Failed to load %s: %s", full_path, e)
            raise

        if import_path is not None:
            shader = shader.with_import_path(import_path)

        handle = self.registry.add(shader)
        self.registry.set_import(ImportRef.asset_path(path), handle)
        self._handles[path] = handle
        logger.info("Loaded shader %s as %s", path, handle)

        if self.settings.load_dependencies:
            try:
                for import_ref in shader.imports:
                    if import_ref.kind is ImportKind.ASSET_PATH:
                        self.load(import_ref.name)
            except (OSError, ValueError):
                # Undo the registration if a dependency fails.
                del self._handles[path]
                self.registry.remove(handle)
                raise

        return handle

    def handle(self, path: str) -> Optional[ShaderHandle]:
        return self._handles.get(path)

    def process(
        self, target: Union[str, ShaderHandle], shader_defs: Iterable[str] = ()
    ) -> ProcessedShader:
        """Process a loaded shader, loading it first if given a path."""
        if isinstance(target, ShaderHandle):
            handle = target
        else:
            handle = self.load(target)
        return self.registry.process(handle, shader_defs, self.processor)
