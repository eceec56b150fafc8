import moderngl
import pytest

from aniline.shaders.compiler import ShaderCompiler
from aniline.shaders.types import ProcessedGlsl, ProcessedWgsl, ShaderStage


class FakeProgram:
    def __init__(self, **sources):
        self.sources = sources
        self.released = False

    def release(self):
        self.released = True


class FakeContext:
    """Stands in for moderngl.Context; records what would be compiled."""

    def __init__(self, fail=False):
        self.fail = fail

    def program(self, vertex_shader, fragment_shader, geometry_shader=None):
        if self.fail:
            raise moderngl.Error("0:1: syntax error")
        return FakeProgram(
            vertex=vertex_shader, fragment=fragment_shader, geometry=geometry_shader
        )

    def compute_shader(self, source):
        return FakeProgram(compute=source)


VERT = ProcessedGlsl("void main() {}\n", ShaderStage.VERTEX)
FRAG = ProcessedGlsl("void main() { }\n", ShaderStage.FRAGMENT)


def test_program_receives_processed_sources():
    compiler = ShaderCompiler(FakeContext())

    program = compiler.program(VERT, FRAG)

    assert program.sources == {
        "vertex": VERT.source,
        "fragment": FRAG.source,
        "geometry": None,
    }


def test_program_rejects_wrong_stage():
    compiler = ShaderCompiler(FakeContext())

    with pytest.raises(ValueError, match="vertex"):
        compiler.program(FRAG, FRAG)


def test_program_rejects_wgsl():
    compiler = ShaderCompiler(FakeContext())

    with pytest.raises(ValueError, match="GLSL"):
        compiler.program(ProcessedWgsl("fn main() {}\n"), FRAG)


def test_compile_error_is_reraised():
    compiler = ShaderCompiler(FakeContext(fail=True))

    with pytest.raises(moderngl.Error):
        compiler.program(VERT, FRAG)


def test_compute_and_release():
    compiler = ShaderCompiler(FakeContext())
    comp = ProcessedGlsl("void main() {}\n", ShaderStage.COMPUTE)

    shader = compiler.compute(comp)
    compiler.release()

    assert shader.sources == {"compute": comp.source}
    assert shader.released


def test_compute_rejects_vertex_stage():
    compiler = ShaderCompiler(FakeContext())

    with pytest.raises(ValueError):
        compiler.compute(VERT)
