import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | mysql | memory
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_DIR = os.getenv("STORAGE_DIR", "var/store")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "karma_manager"),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Kiosk: ignore a second punch of the same person within this window (0 disables)
PUNCH_COOLDOWN_SECONDS = int(os.getenv("PUNCH_COOLDOWN_SECONDS", "300"))
# accept | clamp | reject
PUNCH_TIME_POLICY = os.getenv("PUNCH_TIME_POLICY", "clamp")

DEBUG = True

# If enabled with the mysql backend, the kv_store table is created on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: seed a demo organization with staff and students on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
