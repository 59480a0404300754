# Demo generator: rolling plains, a sandy shore and deep ocean.

biome_parameters = 2
sea_level = 64

biomes = {
    "plains": {
        "parameters": [
            {"value": 0.5, "weight": 1.0},
            {"value": 0.3, "weight": 1.0},
        ],
        "layers": [
            {"block": "grass", "height": 1, "below_sea_level": False},
            {"block": "dirt", "height": 5},
            {"block": "stone", "height": -1},
            {"block": "bedrock", "height": 1},
        ],
        "sea_layers": [
            {"block": "water", "height": -1},
        ],
    },
    "shore": {
        "parameters": [
            {"value": 0.7, "weight": 0.5},
            {"value": 0.6, "weight": 1.0},
        ],
        "layers": [
            {"block": "sand", "height": 3},
            {"block": "stone", "height": -1},
            {"block": "bedrock", "height": 1},
        ],
        "sea_layers": [
            {"block": "water", "height": -1},
        ],
    },
    "ocean": {
        "parameters": [
            {"value": 0.4, "weight": 1.0},
            {"value": 0.9, "weight": 2.0},
        ],
        "layers": [
            {"block": "gravel", "height": 2},
            {"block": "clay", "height": 1},
            {"block": "stone", "height": -1},
            {"block": "bedrock", "height": 1},
        ],
        "sea_layers": [
            {"block": "ice", "height": 1},
            {"block": "water", "height": -1},
        ],
    },
}


def generate_heightmap(offset, size, seed):
    hmap = Heightmap(size[0], size[1])
    hmap.noise(offset, 0.002, 3, 32.0, seed)
    hmap.noise(offset, 0.02, 2, 6.0, seed + 1)
    return hmap.add(sea_level).clamp(1, 250)
