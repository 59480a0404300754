# fills block columns from a heightmap and the bound layers of a biome
import numpy

import config
from blocks import AIR
from errors import BindError


def _place(column, layer, top, height):
    '''fill `height` blocks of `layer` down from `top`; returns the next free y below'''
    if height <= 0 or top < 0:
        return top
    if layer.rt_id is None:
        raise BindError(f'layer {layer.block!r} is not bound, call prepare() first', [layer.block])
    bottom = max(0, top - height + 1)
    column[bottom:top + 1] = layer.rt_id
    return bottom - 1


def _dry_height_below_elastic(stack):
    '''fixed height of the dry-only layers after the elastic one'''
    height = 0
    after = False
    for layer in stack:
        if layer.is_elastic:
            after = True
        elif after and not layer.below_sea_level:
            height += layer.height
    return height


def fill_column(column, biome, surface, sea_level):
    '''
    Fill one column (indexed by y) with the biome's ground layers, top-down
    from `surface`. When the surface is below sea level the sea layers fill
    the gap from sea_level - 1 down to just above the surface.
    '''
    top = int(min(max(surface, 0), len(column) - 1))
    underwater = top < sea_level

    y = top
    stack = biome.ground_layers
    skipped = _dry_height_below_elastic(stack) if underwater else 0
    for layer in stack:
        if y < 0:
            break
        if underwater and not layer.below_sea_level:
            continue
        height = stack.elastic_height(y + 1, skipped) if layer.is_elastic else layer.height
        y = _place(column, layer, y, height)

    if underwater:
        y = min(sea_level, len(column)) - 1
        stack = biome.sea_layers
        for layer in stack:
            if y <= top:
                break
            height = stack.elastic_height(y - top) if layer.is_elastic else layer.height
            y = _place(column, layer, y, min(height, y - top))
    return column


def fill_sector(generator, offset, size, seed, biome_map=None):
    '''
    Generate the heightmap of a region and fill its columns. biome_map[x, y]
    indexes generator.get_biomes(); the default uses the first biome
    everywhere. Returns a uint16 array of shape (size x, CHUNK_H, size y).
    '''
    biomes = generator.get_biomes()
    if not biomes:
        raise ValueError('generator has no biomes')
    w, h = int(size[0]), int(size[1])
    if biome_map is None:
        biome_map = numpy.zeros((w, h), dtype=numpy.int32)
    elif numpy.shape(biome_map) != (w, h):
        raise ValueError(f'biome map of shape {numpy.shape(biome_map)} does not match size {w}x{h}')

    hmap = generator.generate_heightmap(offset, (w, h), seed)
    heights = numpy.floor(hmap.values).astype(numpy.int32)
    sea_level = generator.get_sea_level()
    blocks = numpy.full((w, config.CHUNK_H, h), AIR, dtype='u2')
    for x in range(w):
        for z in range(h):
            fill_column(blocks[x, :, z], biomes[biome_map[x, z]], heights[x, z], sea_level)
    return blocks
