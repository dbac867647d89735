import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Locale used for name sorting, e.g. "en_US.UTF-8". Empty keeps the process locale.
COLLATE_LOCALE = os.getenv("COLLATE_LOCALE", "")
