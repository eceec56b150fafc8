from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from aniline.shaders.types import ShaderSourceVariant


class ImportKind(str, Enum):
    ASSET_PATH = "asset_path"  # #import "path"
    CUSTOM = "custom"  # #import identifier


@dataclass(frozen=True, slots=True)
class ImportRef:
    """
    A requested import, as written in a shader.
    Used both as a registry key and as an error payload.
    """

    kind: ImportKind
    name: str

    @classmethod
    def asset_path(cls, path: str) -> ImportRef:
        return cls(ImportKind.ASSET_PATH, path)

    @classmethod
    def custom(cls, name: str) -> ImportRef:
        return cls(ImportKind.CUSTOM, name)

    def __str__(self) -> str:
        if self.kind is ImportKind.ASSET_PATH:
            return f'"{self.name}"'
        return self.name


def split_lines(text: str) -> List[str]:
    """Split on line feeds, dropping a trailing carriage return per line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class ShaderImportExtractor:
    """
    Finds `#import` directives in shader text.
    Conditional directives are not interpreted here.
    """

    def __init__(self) -> None:
        self.asset_path_regex = re.compile(r'^\s*#\s*import\s*"(.+)"')
        self.custom_path_regex = re.compile(r"^\s*#\s*import\s*(.+)")

    def match_import(self, line: str) -> Optional[ImportRef]:
        cap = self.asset_path_regex.match(line)
        if cap is not None:
            return ImportRef.asset_path(cap.group(1))

        cap = self.custom_path_regex.match(line)
        if cap is not None:
            # Blank names are kept and fail at resolution.
            return ImportRef.custom(cap.group(1).strip())
        return None

    def get_imports_from_str(self, text: str) -> List[ImportRef]:
        imports = []
        for line in split_lines(text):
            import_ref = self.match_import(line)
            if import_ref is not None:
                imports.append(import_ref)
        return imports

    def get_imports(self, source: ShaderSourceVariant) -> List[ImportRef]:
        text = getattr(source, "text", None)
        if text is None:  # SPIR-V
            return []
        return self.get_imports_from_str(text)


@functools.lru_cache(maxsize=None)
def shader_import_extractor() -> ShaderImportExtractor:
    """Shared extractor, built on first use."""
    return ShaderImportExtractor()
