import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

COLLATE_LOCALE = os.getenv("COLLATE_LOCALE", "")
