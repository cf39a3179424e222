
CONFIG = {
    "CELL_SIZE": 30,
    "FPS": 60,
    "DROP_INTERVAL_MS": 1000,
    "TIME_LIMIT_S": 120,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
