import pytest

from aniline.shaders.errors import UnresolvedImportError
from aniline.shaders.handle import ShaderHandle
from aniline.shaders.imports import ImportRef
from aniline.shaders.types import ShaderUnit


def test_registry_add_and_get(registry):
    shader = ShaderUnit.from_wgsl("fn f() {}")

    handle = registry.add(shader)

    assert handle in registry
    assert registry.get(handle) is shader
    assert len(registry) == 1


def test_registry_registers_import_path(registry):
    shader = ShaderUnit.from_wgsl("fn f() {}").with_import_path("lib")

    handle = registry.add(shader)

    assert registry.handle_for(ImportRef.custom("lib")) == handle
    assert registry.import_handles[ImportRef.custom("lib")] == handle


def test_registry_missing_item(registry):
    handle = ShaderHandle.new()

    assert handle not in registry
    assert registry.get(handle) is None
    assert registry.handle_for(ImportRef.custom("nope")) is None


def test_set_import_requires_registered_handle(registry):
    with pytest.raises(KeyError):
        registry.set_import(ImportRef.custom("x"), ShaderHandle.new())


def test_views_are_read_only(registry):
    registry.add(ShaderUnit.from_wgsl(""))

    with pytest.raises(TypeError):
        registry.shaders[ShaderHandle.new()] = ShaderUnit.from_wgsl("")


def test_registry_process_resolves_imports(registry):
    registry.add(ShaderUnit.from_wgsl("fn lib() {}").with_import_path("lib"))
    main = registry.add(ShaderUnit.from_wgsl("#import lib\n#ifdef A\nfn a() {}\n#endif"))

    assert registry.process(main).source == "fn lib() {}\n"
    assert registry.process(main, ["A"]).source == "fn lib() {}\nfn a() {}\n"


def test_remove_drops_imports(registry):
    lib = registry.add(ShaderUnit.from_wgsl("fn lib() {}").with_import_path("lib"))
    registry.set_import(ImportRef.asset_path("lib.wgsl"), lib)
    main = registry.add(ShaderUnit.from_wgsl("#import lib\n"))

    registry.remove(lib)

    assert lib not in registry
    assert registry.handle_for(ImportRef.custom("lib")) is None
    assert registry.handle_for(ImportRef.asset_path("lib.wgsl")) is None
    with pytest.raises(UnresolvedImportError):
        registry.process(main)


def test_process_unknown_handle(registry):
    with pytest.raises(KeyError):
        registry.process(ShaderHandle.new())


def test_registry_clear(registry):
    a = registry.add(ShaderUnit.from_wgsl("a").with_import_path("a"))
    b = registry.add(ShaderUnit.from_wgsl("b"))

    registry.clear()

    assert a not in registry
    assert b not in registry
    assert registry.handle_for(ImportRef.custom("a")) is None
