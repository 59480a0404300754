#
# Every script environment is a separate globals table executed by the one
# shared interpreter. Entry into any environment goes through INTERPRETER_LOCK,
# so the chunk pipeline may call scripted generators from any worker thread.
#
import ast
import builtins
import math
import threading

import config
import logutil
from errors import ScriptFault
from fields import clamp_integer
from generator import GeneratorScript
from heightmap import Heightmap

INTERPRETER_LOCK = threading.RLock()


def _sandbox_builtins():
    names = getattr(config, 'SCRIPT_BUILTINS', ())
    return {name: getattr(builtins, name) for name in names if hasattr(builtins, name)}


def check_script(tree):
    '''reject a parsed script that names a blocked attribute or a dunder global'''
    prefixes = tuple(getattr(config, 'SCRIPT_BLOCKED_PREFIXES', ('_',)))
    blocked = getattr(config, 'SCRIPT_BLOCKED_ATTRIBUTES', ())
    for node in ast.walk(tree):
        if isinstance(node, ast.Attribute):
            if node.attr.startswith(prefixes) or node.attr in blocked:
                raise PermissionError(f'line {node.lineno}: attribute {node.attr!r} is not allowed')
        elif isinstance(node, ast.Name) and node.id.startswith('__'):
            raise PermissionError(f'line {node.lineno}: name {node.id!r} is not allowed')


class ScriptEnvironment(object):
    def __init__(self, name='script'):
        self.name = name
        self.globals = {
            '__builtins__': _sandbox_builtins(),
            '__name__': name,
            'Heightmap': Heightmap,
            'math': math,
        }

    def execute(self, source, filename=None):
        filename = filename or f'<{self.name}>'
        with INTERPRETER_LOCK:
            try:
                tree = ast.parse(source, filename)
                check_script(tree)
                exec(compile(tree, filename, 'exec'), self.globals)
            except Exception as e:
                raise ScriptFault(f'{filename}: {type(e).__name__}: {e}') from e

    def has(self, name):
        return callable(self.globals.get(name))

    def get(self, name, default=None):
        return self.globals.get(name, default)

    def get_integer(self, name, default, minimum, maximum):
        return clamp_integer(self.globals.get(name), name, default, minimum, maximum)

    def call(self, name, *args):
        with INTERPRETER_LOCK:
            func = self.globals.get(name)
            if not callable(func):
                raise ScriptFault(f'{self.name}: no function {name!r}')
            try:
                return func(*args)
            except Exception as e:
                raise ScriptFault(f'{self.name}.{name}: {type(e).__name__}: {e}') from e


def create_environment(name='script'):
    return ScriptEnvironment(name)


class ScriptedGenerator(GeneratorScript):
    '''
    Heights come from the environment's generate_heightmap(offset, size, seed).
    A missing entry point or a failing call yields the baseline heightmap; the
    fault is logged and never reaches the chunk pipeline.
    '''
    ENTRY_POINT = 'generate_heightmap'

    def __init__(self, env, biomes, biome_parameters, sea_level):
        super().__init__(biomes, biome_parameters, sea_level)
        self.env = env
        self._missing_reported = False

    def generate_heightmap(self, offset, size, seed):
        offset = (int(offset[0]), int(offset[1]))
        size = (int(size[0]), int(size[1]))
        with INTERPRETER_LOCK:
            if not self.env.has(self.ENTRY_POINT):
                if not self._missing_reported:
                    self._missing_reported = True
                    logutil.log('SCRIPT', f'{self.env.name}: no {self.ENTRY_POINT}(), using baseline heights', level='WARN')
                return Heightmap.baseline(size)
            try:
                result = self.env.call(self.ENTRY_POINT, offset, size, int(seed))
                return self._unwrap(result, size)
            except ScriptFault as e:
                if getattr(config, 'LOG_SCRIPT_FAULTS', True):
                    logutil.log('SCRIPT', f'heightmap at {offset} size {size}: {e}', level='WARN')
        return Heightmap.baseline(size)

    def _unwrap(self, result, size):
        # copy out so the script can't alias or mutate what the pipeline holds
        if not isinstance(result, Heightmap):
            raise ScriptFault(f'{self.env.name}.{self.ENTRY_POINT}: expected Heightmap, got {type(result).__name__}')
        if result.size != size:
            raise ScriptFault(f'{self.env.name}.{self.ENTRY_POINT}: heightmap size {result.size} != {size}')
        return result.copy()
