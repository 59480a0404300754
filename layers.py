# Layers are listed top-down: the first one sits at the surface. One layer per
# stack may be elastic (height -1); it stretches to fill the space left between
# the layers above it and the layers listed after it, which rest on the bottom.
from errors import ConfigError
from fields import require_string_field, require_integer_field, get_boolean_field, is_list

ELASTIC = -1


class BlocksLayer(object):
    def __init__(self, block, height, below_sea_level=True):
        self.block = block
        self.height = height
        self.below_sea_level = below_sea_level
        self.rt_id = None #runtime block id, set by the generator's prepare()

    @property
    def is_elastic(self):
        return self.height == ELASTIC

    def __eq__(self, other):
        if not isinstance(other, BlocksLayer):
            return NotImplemented
        return (self.block, self.height, self.below_sea_level) == (other.block, other.height, other.below_sea_level)

    def __hash__(self):
        return hash((self.block, self.height, self.below_sea_level))

    def __repr__(self):
        return f'BlocksLayer({self.block!r}, {self.height}, below_sea_level={self.below_sea_level})'


class BlocksLayers(object):
    def __init__(self, layers=(), total_fixed_height=0):
        self.layers = tuple(layers)
        # sum of the fixed heights of the layers after the elastic one
        self.total_fixed_height = total_fixed_height

    def __iter__(self):
        return iter(self.layers)

    def __len__(self):
        return len(self.layers)

    def __getitem__(self, i):
        return self.layers[i]

    def __eq__(self, other):
        if not isinstance(other, BlocksLayers):
            return NotImplemented
        return self.layers == other.layers and self.total_fixed_height == other.total_fixed_height

    def __hash__(self):
        return hash((self.layers, self.total_fixed_height))

    def __repr__(self):
        return f'BlocksLayers({list(self.layers)!r}, total_fixed_height={self.total_fixed_height})'

    @property
    def elastic(self):
        for layer in self.layers:
            if layer.is_elastic:
                return layer
        return None

    def elastic_height(self, depth, skipped=0):
        '''
        Size of the elastic layer when `depth` blocks remain below its top,
        leaving room for the fixed layers defined after it. `skipped` is the
        part of total_fixed_height that is not placed in this column.
        '''
        return max(0, depth - (self.total_fixed_height - skipped))


class _LayerScan(object):
    def __init__(self):
        self.total_fixed_height = 0
        self.has_elastic = False


def load_layer(entry, scan):
    block = require_string_field(entry, 'block')
    height = require_integer_field(entry, 'height')
    below_sea_level = get_boolean_field(entry, 'below_sea_level', True)
    if height < ELASTIC:
        raise ConfigError(f'invalid layer height {height}')

    if height == ELASTIC:
        if scan.has_elastic:
            raise ConfigError('only one elastic layer allowed')
        scan.has_elastic = True
    elif scan.has_elastic:
        scan.total_fixed_height += height
    return BlocksLayer(block, height, below_sea_level)


def load_layers(container, fieldname):
    '''
    Load the layer list stored at container[fieldname]. A missing field gives
    an empty stack; a bad entry fails with its 1-based position.
    '''
    entries = container.get(fieldname)
    if entries is None:
        return BlocksLayers()
    if not is_list(entries):
        raise ConfigError(f'{fieldname!r} must be a list')

    scan = _LayerScan()
    layers = []
    for i, entry in enumerate(entries, 1):
        try:
            layers.append(load_layer(entry, scan))
        except ConfigError as err:
            raise err.with_context(f'{fieldname} #{i}')
    return BlocksLayers(layers, scan.total_fixed_height)
