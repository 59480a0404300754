'''
preview.py -- print the heightmap a generator definition produces for one region

usage: python preview.py <definition.py> [seed] [x,y] [w,h]
'''
import sys

import config
import logutil
from errors import ConfigError, ScriptFault
from generator_loader import load_generator_file


def format_heightmap(hmap, title=None):
    lines = []
    if title:
        lines.append(title)
    for y in range(hmap.height):
        row = []
        for x in range(hmap.width):
            val = int(round(hmap.get(x, y)))
            if val < 0:
                cell = "--"
            else:
                cell = f"{min(255, val):02X}"
            row.append(cell)
        lines.append(" ".join(row))
    return "\n".join(lines)


def _pair(arg, default):
    if arg is None:
        return default
    a, b = arg.split(',', 1)
    return int(a), int(b)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(__doc__.strip().splitlines()[-1])
        return 2
    path = argv[0]
    try:
        seed = int(argv[1]) if len(argv) > 1 else 0
        offset = _pair(argv[2] if len(argv) > 2 else None, (0, 0))
        size = _pair(argv[3] if len(argv) > 3 else None, (config.CHUNK_W, config.CHUNK_W))
    except ValueError as e:
        logutil.log("PREVIEW", f"bad arguments: {e}", level="ERROR")
        return 2
    try:
        generator = load_generator_file(path)
    except (ConfigError, ScriptFault, OSError, UnicodeDecodeError) as e:
        logutil.log("PREVIEW", f"can't load {path}: {e}", level="ERROR")
        return 1
    hmap = generator.generate_heightmap(offset, size, seed)
    print(format_heightmap(hmap, title=f"{path} seed={seed} off={offset} size={size}"))
    return 0


if __name__ == '__main__':
    sys.exit(main())
