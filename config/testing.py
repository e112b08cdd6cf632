SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_DIR = None
DB_CONFIG = {}

LOG_LEVEL = "DEBUG"
LOG_JSON = False

PUNCH_COOLDOWN_SECONDS = 0
PUNCH_TIME_POLICY = "clamp"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
SEED_DEMO_DATA = False
