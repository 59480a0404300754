# Column geometry of a chunk (x and z width, y height).
CHUNK_W = 16 #width and depth (x and z)
CHUNK_H = 256 #height of world (y)

# Upper bound on the number of biome parameter axes a generator may declare.
MAX_BIOME_PARAMETERS = 16

# Elevation of every sample in the fallback heightmap.
HEIGHTMAP_BASELINE = 0.0

# Native generator noise settings (step is in blocks, scale/offset in blocks of elevation).
CONTINENTAL_STEP = 1500.0
CONTINENTAL_SCALE = 40.0
CONTINENTAL_OFFSET = 80.0
HILL_STEP = 40.0
HILL_SCALE = 5.0
HILL_OFFSET = 5.0

# Names made available as builtins inside generator scripts.
SCRIPT_BUILTINS = (
    'abs', 'all', 'any', 'bool', 'dict', 'divmod', 'enumerate', 'filter',
    'float', 'int', 'isinstance', 'len', 'list', 'map', 'max', 'min', 'pow',
    'range', 'reversed', 'round', 'set', 'sorted', 'str', 'sum', 'tuple',
    'zip', 'print', 'ValueError', 'TypeError', 'KeyError', 'RuntimeError',
)

# Attribute names scripts may not use. Names starting with one of the prefixes
# reach interpreter internals (dunders, generator and traceback frames); the
# others write files or walk attributes through a format string.
SCRIPT_BLOCKED_PREFIXES = ('_', 'gi_', 'cr_', 'ag_', 'f_', 'tb_', 'co_')
SCRIPT_BLOCKED_ATTRIBUTES = ('tofile', 'dump', 'dumps', 'ctypes', 'format', 'format_map')

# Enable ANSI colors in logs.
LOG_COLOR = True

# Drop log lines below this level (DEBUG, INFO, WARN, ERROR).
LOG_LEVEL = 'INFO'

# Report scripted heightmap faults (the fallback heightmap is used either way).
LOG_SCRIPT_FAULTS = True
