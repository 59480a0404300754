from collections import namedtuple

AIR = 0

# A finalized block: its name, the integer id used in chunk arrays, and whether it is solid.
BlockDef = namedtuple('BlockDef', ['name', 'rt_id', 'solid'])


class Block(object):
    name = None
    solid = True

class Decoration(object):
    solid = False

class Grass(Block):
    name = 'grass'

class Dirt(Block):
    name = 'dirt'

class Stone(Block):
    name = 'stone'

class Sand(Block):
    name = 'sand'

class Gravel(Block):
    name = 'gravel'

class Clay(Block):
    name = 'clay'

class Snow(Block):
    name = 'snow'

class Bedrock(Block):
    name = 'bedrock'

class Water(Block):
    name = 'water'
    solid = False

class Ice(Block):
    name = 'ice'

class Rose(Decoration, Block):
    name = 'rose'
    solid = False


BLOCKS = [
    Grass,
    Dirt,
    Stone,
    Sand,
    Gravel,
    Clay,
    Snow,
    Bedrock,
    Water,
    Ice,
    Rose,
]


class BlockRegistry(object):
    '''
    Content registry collaborator of the terrain generators. Blocks are
    registered while content loads; ids are handed out in registration order
    starting at 1 (0 is air) and become fixed once finalize() is called.
    '''
    def __init__(self, blocks=()):
        self._defs = {}
        self._order = []
        self.finalized = False
        for block in blocks:
            self.register(block)

    def register(self, block):
        if self.finalized:
            raise RuntimeError(f"registry is finalized, can't add block {block.name!r}")
        if block.name in self._defs:
            raise ValueError(f'duplicate block name {block.name!r}')
        rt_id = len(self._order) + 1
        self._defs[block.name] = BlockDef(block.name, rt_id, bool(getattr(block, 'solid', True)))
        self._order.append(block.name)
        return rt_id

    def finalize(self):
        self.finalized = True
        return self

    def require(self, name):
        try:
            return self._defs[name]
        except KeyError:
            raise KeyError(f'block {name!r} not found') from None

    def find(self, name):
        return self._defs.get(name)

    def __contains__(self, name):
        return name in self._defs

    def __len__(self):
        return len(self._order)


def default_registry():
    return BlockRegistry(BLOCKS).finalize()
