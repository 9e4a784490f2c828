CONFIG = {
    "CELL_SIZE": 32,
    "TICK_MS": 500,       # one cell of gravity per tick
    "BAG_SEED": None,     # None => random; set int for reproducibility
    "LOG_LEVEL": "INFO",
}
