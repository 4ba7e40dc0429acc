import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | memory | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_DIR = os.getenv("STORAGE_DIR", "instance/store")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "dayflow"),
}

DEBUG = True

# Simulated network latency on login/signup.
AUTH_DELAY_SECONDS = float(os.getenv("AUTH_DELAY_SECONDS", "0.5"))

# Seed demo accounts and payroll the first time a collection is read.
AUTO_SEED_STORE = bool(int(os.getenv("AUTO_SEED_STORE", "1")))
