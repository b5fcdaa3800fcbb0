import os

PORT = int(os.environ.get("PORT", 8080))
MAX_BOARD_SIZE = int(os.environ.get("QUEENS_MAX_BOARD_SIZE", 10))
DEBUG = os.environ.get("QUEENS_DEBUG", "").lower() in ("1", "true", "yes")
