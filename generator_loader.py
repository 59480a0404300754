'''
generator_loader.py -- turns a generator definition script into a ready generator

A definition is a script setting these globals:

    biome_parameters = 2      # number of parameter axes, 0..16
    sea_level = 63            # 0..CHUNK_H
    biomes = {
        "plains": {
            "parameters": [{"value": 0.5, "weight": 1.0}, {"value": 0.3, "weight": 1.0}],
            "layers": [{"block": "grass", "height": 1, "below_sea_level": False},
                       {"block": "dirt", "height": -1},
                       {"block": "stone", "height": 20}],
            "sea_layers": [{"block": "water", "height": -1}],
        },
    }

and optionally a generate_heightmap(offset, size, seed) function returning a
Heightmap. The load either succeeds completely or raises.
'''
import os

import config
import logutil
from biomes import load_biome
from errors import ConfigError
from fields import is_table
from scripting import create_environment, ScriptedGenerator


def load_biomes(env, parameter_count):
    table = env.get('biomes')
    if table is None:
        raise ConfigError("missing field 'biomes'")
    if not is_table(table):
        raise ConfigError("'biomes' must be a table")
    biomes = []
    for key, entry in table.items():
        name = str(key)
        try:
            biomes.append(load_biome(entry, name, parameter_count))
        except ConfigError as err:
            raise err.with_context(f'biome {name}')
    return biomes


def load_generator(source, name='generator', filename=None):
    env = create_environment(name)
    env.execute(source, filename)

    biome_parameters = env.get_integer('biome_parameters', 0, 0, config.MAX_BIOME_PARAMETERS)
    sea_level = env.get_integer('sea_level', 0, 0, config.CHUNK_H)
    biomes = load_biomes(env, biome_parameters)

    logutil.log('LOADER', f'{name}: {len(biomes)} biomes, {biome_parameters} parameters, sea level {sea_level}')
    return ScriptedGenerator(env, biomes, biome_parameters, sea_level)


def load_generator_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    name = os.path.splitext(os.path.basename(path))[0]
    return load_generator(source, name=name, filename=str(path))
