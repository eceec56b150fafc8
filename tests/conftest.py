import pytest

from aniline.assets.registry import ShaderRegistry
from aniline.shaders.processor import ShaderProcessor


@pytest.fixture
def processor():
    """Returns a fresh ShaderProcessor for each test."""
    return ShaderProcessor()


@pytest.fixture
def registry():
    """Returns an empty ShaderRegistry for each test."""
    return ShaderRegistry()
