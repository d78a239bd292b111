
CONFIG = {
    "CELL_SIZE": 32,
    "TICK_MS": 500,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
