'''
generator.py -- the interface the chunk pipeline uses to generate terrain

A generator produces heightmaps for chunk regions and owns the biome catalog
whose layer stacks fill the columns. Block names in the layers are symbolic
until prepare() binds them against the finalized content registry.
'''
import abc

import numpy

import config
import logutil
import noise
from errors import BindError
from heightmap import Heightmap


def bind_biomes(biomes, content):
    '''
    Resolve every layer's block name to its runtime id. Either all layers are
    bound or, if any name is missing, none are touched.
    '''
    if not getattr(content, 'finalized', True):
        raise BindError('content registry is not finalized')
    resolved = []
    missing = []
    for biome in biomes:
        for layer in biome.iter_layers():
            try:
                resolved.append((layer, content.require(layer.block).rt_id))
            except KeyError:
                if layer.block not in missing:
                    missing.append(layer.block)
    if missing:
        names = ', '.join(repr(name) for name in missing)
        raise BindError(f'unknown blocks referenced by layers: {names}', missing)
    for layer, rt_id in resolved:
        layer.rt_id = rt_id
    logutil.log('BIND', f'bound {len(resolved)} layers of {len(biomes)} biomes', level='DEBUG')


class GeneratorScript(abc.ABC):
    '''
    generate_heightmap must be a pure function of its arguments and the
    loaded definition so that regenerating a region reproduces it exactly.
    '''

    def __init__(self, biomes, biome_parameters, sea_level):
        self._biomes = tuple(biomes)
        self._biome_parameters = biome_parameters
        self._sea_level = sea_level

    @abc.abstractmethod
    def generate_heightmap(self, offset, size, seed):
        pass

    def prepare(self, content):
        bind_biomes(self._biomes, content)

    def get_biomes(self):
        return self._biomes

    def get_biome_parameters(self):
        return self._biome_parameters

    def get_sea_level(self):
        return self._sea_level


class NativeGenerator(GeneratorScript):
    '''Continental swells with rolling hills on top, computed in numpy without locking.'''

    def __init__(self, biomes=(), biome_parameters=0, sea_level=0):
        super().__init__(biomes, biome_parameters, sea_level)
        self.continental = (
            getattr(config, 'CONTINENTAL_STEP', 1500.0),
            getattr(config, 'CONTINENTAL_SCALE', 40.0),
            getattr(config, 'CONTINENTAL_OFFSET', 80.0),
        )
        self.hills = (
            getattr(config, 'HILL_STEP', 40.0),
            getattr(config, 'HILL_SCALE', 5.0),
            getattr(config, 'HILL_OFFSET', 5.0),
        )

    def generate_heightmap(self, offset, size, seed):
        # fresh noise objects per call keep concurrent calls independent
        step, scale, off = self.continental
        base = noise.region_noise(noise.SimplexNoise(seed + 14), offset, size, step) * scale + off
        step, scale, off = self.hills
        hill = noise.region_noise(noise.SimplexNoise(seed + 12), offset, size, step, octaves=2) * scale + off
        gain = noise.region_noise(noise.SimplexNoise(seed + 18), offset, size, step * 75.0)
        height = base + hill * (1.0 + 0.5 * gain)
        height = numpy.clip(height, 1, config.CHUNK_H - 1)
        return Heightmap(size[0], size[1], height)
