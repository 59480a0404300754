# exceptions raised while loading, binding and running terrain generators


class ConfigError(ValueError):
    '''
    A generator definition is malformed. The message carries the path to the
    offending fragment, e.g. "biome plains: sea_layers #2: only one elastic layer allowed"
    '''

    def with_context(self, prefix):
        msg = str(self)
        if msg.startswith(prefix + ': '):
            return self
        err = ConfigError(f'{prefix}: {msg}')
        err.__cause__ = self.__cause__
        return err


class BindError(LookupError):
    '''Block names referenced by layers are missing from the content registry.'''

    def __init__(self, msg, missing=()):
        super().__init__(msg)
        self.missing = tuple(missing)

    def __str__(self):
        return self.args[0]


class ScriptFault(RuntimeError):
    '''A generator script failed to run or lacks a required entry point.'''
