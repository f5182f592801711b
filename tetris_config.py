
CONFIG = {
    "CELL_SIZE": 30,
    "TICK_MS": 500,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
