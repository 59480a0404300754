# typed access to fields of the tables a generator definition is made of
import math
from collections.abc import Mapping, Sequence

from errors import ConfigError


def is_table(value):
    return isinstance(value, Mapping)


def is_list(value):
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _require(table, key):
    if not is_table(table):
        raise ConfigError(f'table expected, got {type(table).__name__}')
    if key not in table or table[key] is None:
        raise ConfigError(f'missing field {key!r}')
    return table[key]


def require_field(table, key):
    return _require(table, key)


def require_string_field(table, key):
    value = _require(table, key)
    if not isinstance(value, str):
        raise ConfigError(f'{key!r} must be a string')
    return value


def require_integer_field(table, key):
    value = _require(table, key)
    # bool is an int subclass but never a valid height or count
    if isinstance(value, bool):
        raise ConfigError(f'{key!r} must be an integer')
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise ConfigError(f'{key!r} must be an integer')
    return value


def require_number_field(table, key):
    value = _require(table, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f'{key!r} must be a number')
    try:
        value = float(value)
    except OverflowError:
        raise ConfigError(f'{key!r} must be a finite number') from None
    if not math.isfinite(value):
        raise ConfigError(f'{key!r} must be a finite number')
    return value


def get_boolean_field(table, key, default):
    value = table.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f'{key!r} must be a boolean')
    return value


def clamp_integer(value, key, default, minimum, maximum):
    '''coerce an optional global setting to an int within [minimum, maximum]'''
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f'{key!r} must be an integer')
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigError(f'{key!r} must be an integer')
    return max(minimum, min(maximum, int(value)))
