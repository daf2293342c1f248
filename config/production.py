import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

SESSION_TICK_SECONDS = float(os.getenv("SESSION_TICK_SECONDS", "1"))
STRICT_CHECKOUT = bool(int(os.getenv("STRICT_CHECKOUT", "0")))

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
# Must be a werkzeug hash; an unset value makes admin login always fail
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")
