import os

from werkzeug.security import generate_password_hash

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo employees and attendance logs into the in-memory store
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# Elapsed-time refresh period while checked in; 0 disables the background ticker
SESSION_TICK_SECONDS = float(os.getenv("SESSION_TICK_SECONDS", "1"))
# Raise instead of silently ignoring a checkout whose record has disappeared
STRICT_CHECKOUT = bool(int(os.getenv("STRICT_CHECKOUT", "0")))

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "jayanth20")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH") or generate_password_hash("jayanth@12")
