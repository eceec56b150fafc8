from __future__ import annotations

import logging
from typing import List, Optional, Union

import moderngl

from aniline.shaders.types import ProcessedGlsl, ProcessedShader, ShaderStage

logger = logging.getLogger(__name__)


def _require_glsl(
    processed: Optional[ProcessedShader], stage: ShaderStage
) -> Optional[str]:
    if processed is None:
        return None
    if not isinstance(processed, ProcessedGlsl):
        raise ValueError(
            f"Expected a processed GLSL {stage.value} shader, got {type(processed).__name__}."
        )
    if processed.stage is not stage:
        raise ValueError(
            f"Expected a {stage.value} shader, got a {processed.stage.value} shader."
        )
    return processed.source


class ShaderCompiler:
    """
    Hands processed GLSL to moderngl.

    WGSL and SPIR-V are not accepted; moderngl compiles GLSL only.
    """

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx
        self._programs: List[Union[moderngl.Program, moderngl.ComputeShader]] = []

    def program(
        self,
        vertex: ProcessedShader,
        fragment: ProcessedShader,
        geometry: Optional[ProcessedShader] = None,
    ) -> moderngl.Program:
        """Link a vertex/fragment (and optional geometry) program."""
        vert_source = _require_glsl(vertex, ShaderStage.VERTEX)
        frag_source = _require_glsl(fragment, ShaderStage.FRAGMENT)
        # Geometry shaders have no stage of their own in the source model.
        geom_source = None
        if geometry is not None:
            if not isinstance(geometry, ProcessedGlsl):
                raise ValueError("Geometry shader must be processed GLSL.")
            geom_source = geometry.source

        try:
            program = self.ctx.program(
                vertex_shader=vert_source,
                fragment_shader=frag_source,
                geometry_shader=geom_source,
            )
        except moderngl.Error as e:
            logger.error("Shader compilation failed: %s", e)
            raise

        self._programs.append(program)
        return program

    def compute(self, processed: ProcessedShader) -> moderngl.ComputeShader:
        source = _require_glsl(processed, ShaderStage.COMPUTE)
        try:
            shader = self.ctx.compute_shader(source)
        except moderngl.Error as e:
            logger.error("Compute shader compilation failed: %s", e)
            raise

        self._programs.append(shader)
        return shader

    def release(self) -> None:
        for prog in self._programs:
            prog.release()
        self._programs.clear()
