SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_DIR = None

DB_CONFIG = {}

DEBUG = False
TESTING = True

AUTH_DELAY_SECONDS = 0
AUTO_SEED_STORE = True
