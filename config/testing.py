DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

COLLATE_LOCALE = ""
