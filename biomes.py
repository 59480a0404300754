from collections import namedtuple

from errors import ConfigError
from fields import require_field, require_number_field, is_list, is_table
from layers import load_layers

# One axis of a biome's position in parameter space (temperature, humidity, ...).
BiomeParameter = namedtuple('BiomeParameter', ['value', 'weight'])


class Biome(object):
    def __init__(self, name, parameters, ground_layers, sea_layers):
        self.name = name
        self.parameters = tuple(parameters)
        self.ground_layers = ground_layers
        self.sea_layers = sea_layers

    def iter_layers(self):
        for layer in self.ground_layers:
            yield layer
        for layer in self.sea_layers:
            yield layer

    def __eq__(self, other):
        if not isinstance(other, Biome):
            return NotImplemented
        return (self.name, self.parameters, self.ground_layers, self.sea_layers) == \
            (other.name, other.parameters, other.ground_layers, other.sea_layers)

    def __hash__(self):
        return hash((self.name, self.parameters))

    def __repr__(self):
        return f'Biome({self.name!r}, parameters={list(self.parameters)!r})'


def load_parameters(entry, count):
    params = require_field(entry, 'parameters')
    if not is_list(params) or len(params) < count:
        raise ConfigError(f'{count} parameters expected')
    parameters = []
    for i in range(count):
        try:
            value = require_number_field(params[i], 'value')
            weight = require_number_field(params[i], 'weight')
        except ConfigError as err:
            raise err.with_context(f'parameters #{i + 1}')
        parameters.append(BiomeParameter(value, weight))
    return parameters


def load_biome(entry, name, parameter_count):
    try:
        if not is_table(entry):
            raise ConfigError('table expected')
        parameters = load_parameters(entry, parameter_count)
        require_field(entry, 'layers')
        ground_layers = load_layers(entry, 'layers')
        sea_layers = load_layers(entry, 'sea_layers')
    except ConfigError as err:
        raise err.with_context(f'biome {name}')
    return Biome(name, parameters, ground_layers, sea_layers)
