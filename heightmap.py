'''
heightmap.py -- 2-D grid of elevation samples for a chunk region

Samples are absolute elevations in blocks, stored as float32 and indexed
values[x, y]. All operations work in place and return the heightmap so that
generator scripts can chain them:

    map = Heightmap(*size)
    map.noise(offset, 0.01, 4, 40.0, seed).add(64.0)
'''
import numpy

import config
import noise


class Heightmap(object):
    def __init__(self, width, height, values=None):
        width, height = int(width), int(height)
        if width < 0 or height < 0:
            raise ValueError(f'invalid heightmap size {width}x{height}')
        if values is None:
            self.values = numpy.zeros((width, height), dtype=numpy.float32)
        else:
            values = numpy.asarray(values, dtype=numpy.float32)
            if values.shape != (width, height):
                raise ValueError(f'values of shape {values.shape} do not match size {width}x{height}')
            self.values = values

    @classmethod
    def from_array(cls, arr):
        arr = numpy.array(arr, dtype=numpy.float32)
        if arr.ndim != 2:
            raise ValueError('2-D array expected')
        return cls(arr.shape[0], arr.shape[1], arr)

    @classmethod
    def baseline(cls, size):
        hmap = cls(size[0], size[1])
        hmap.values.fill(getattr(config, 'HEIGHTMAP_BASELINE', 0.0))
        return hmap

    @property
    def width(self):
        return self.values.shape[0]

    @property
    def height(self):
        return self.values.shape[1]

    @property
    def size(self):
        return self.values.shape

    def __len__(self):
        return self.values.size

    def __repr__(self):
        return f'Heightmap({self.width}, {self.height})'

    def get(self, x, y):
        return float(self.values[x, y])

    def copy(self):
        return Heightmap(self.width, self.height, self.values.copy())

    def _operand(self, other):
        if isinstance(other, Heightmap):
            if other.size != self.size:
                raise ValueError(f'heightmap size mismatch {other.size} != {self.size}')
            return other.values
        return numpy.float32(other)

    def fill(self, value):
        self.values.fill(value)
        return self

    def noise(self, offset, scale, octaves=1, multiplier=1.0, seed=0):
        '''add fractal simplex noise sampled at world coordinates offset + (x, y) times scale'''
        if scale <= 0:
            raise ValueError('noise scale must be positive')
        n = noise.region_noise(noise.SimplexNoise(seed), offset, self.size, 1.0 / scale, octaves)
        self.values += (n * multiplier).astype(numpy.float32)
        return self

    def add(self, other):
        self.values += self._operand(other)
        return self

    def mul(self, other):
        self.values *= self._operand(other)
        return self

    def pow(self, exponent):
        numpy.power(self.values, self._operand(exponent), out=self.values)
        return self

    def abs(self):
        numpy.abs(self.values, out=self.values)
        return self

    def min(self, other):
        numpy.minimum(self.values, self._operand(other), out=self.values)
        return self

    def max(self, other):
        numpy.maximum(self.values, self._operand(other), out=self.values)
        return self

    def clamp(self, low, high):
        numpy.clip(self.values, low, high, out=self.values)
        return self
