
CONFIG = {
    "CELL_SIZE": 30,
    "FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
