import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from blocks import BLOCKS, Block, BlockRegistry, default_registry
from errors import BindError
from generator import NativeGenerator
from generator_loader import load_generator, load_generator_file

DEMO = os.path.join(ROOT, "generators", "demo.py")

PLAINS = '''
biome_parameters = 2
sea_level = 63
biomes = {
    "plains": {
        "parameters": [{"value": 0.5, "weight": 1.0}, {"value": 0.3, "weight": 1.0}],
        "layers": [
            {"block": "grass", "height": 1},
            {"block": "dirt", "height": -1},
            {"block": "stone", "height": 20},
        ],
        "sea_layers": [{"block": "water", "height": -1}],
    },
    "beach": {
        "parameters": [{"value": 0.1, "weight": 1.0}, {"value": 0.9, "weight": 1.0}],
        "layers": [{"block": "sand", "height": 4}, {"block": "stone", "height": -1}],
    },
}
'''


def _all_layers(gen):
    return [layer for biome in gen.get_biomes() for layer in biome.iter_layers()]


def _registry_without(name):
    return BlockRegistry([b for b in BLOCKS if b.name != name]).finalize()


def test_prepare_binds_registry_ids():
    gen = load_generator(PLAINS)
    content = default_registry()
    gen.prepare(content)
    layers = _all_layers(gen)
    assert len(layers) == 6
    for layer in layers:
        assert layer.rt_id == content.require(layer.block).rt_id
        assert layer.rt_id > 0


def test_prepare_is_all_or_nothing():
    gen = load_generator(PLAINS)
    with pytest.raises(BindError) as info:
        gen.prepare(_registry_without("stone"))
    assert info.value.missing == ("stone",)
    assert "'stone'" in str(info.value)
    assert all(layer.rt_id is None for layer in _all_layers(gen))


def test_prepare_lists_every_missing_block():
    gen = load_generator(PLAINS)
    content = BlockRegistry([b for b in BLOCKS if b.name not in ("stone", "sand", "water")]).finalize()
    with pytest.raises(BindError) as info:
        gen.prepare(content)
    assert sorted(info.value.missing) == ["sand", "stone", "water"]


def test_prepare_twice_is_idempotent():
    gen = load_generator_file(DEMO)
    content = default_registry()
    gen.prepare(content)
    first = [layer.rt_id for layer in _all_layers(gen)]
    gen.prepare(content)
    assert [layer.rt_id for layer in _all_layers(gen)] == first


def test_failed_rebind_keeps_resolved_ids():
    gen = load_generator(PLAINS)
    gen.prepare(default_registry())
    first = [layer.rt_id for layer in _all_layers(gen)]
    with pytest.raises(BindError):
        gen.prepare(_registry_without("dirt"))
    assert [layer.rt_id for layer in _all_layers(gen)] == first


def test_unfinalized_registry_is_rejected():
    gen = load_generator(PLAINS)
    gen.prepare(default_registry())
    first = [layer.rt_id for layer in _all_layers(gen)]

    class Moss(Block):
        name = 'moss'

    # moss first shifts every id
    pending = BlockRegistry([Moss] + BLOCKS)
    with pytest.raises(BindError, match="not finalized"):
        gen.prepare(pending)
    assert [layer.rt_id for layer in _all_layers(gen)] == first


def test_registry_require():
    content = default_registry()
    assert content.require("grass").rt_id == 1
    assert content.finalized
    assert len(content) == len(BLOCKS)
    assert "water" in content and "obsidian" not in content
    assert content.find("obsidian") is None
    with pytest.raises(KeyError):
        content.require("obsidian")
    with pytest.raises(RuntimeError):
        content.register(Block)


def test_native_generator_binds_the_same_way():
    gen = load_generator(PLAINS)
    native = NativeGenerator(gen.get_biomes(), gen.get_biome_parameters(), gen.get_sea_level())
    native.prepare(default_registry())
    assert all(layer.rt_id is not None for layer in _all_layers(native))
