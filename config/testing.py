from werkzeug.security import generate_password_hash

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = True

# Tests drive the elapsed display explicitly
SESSION_TICK_SECONDS = 0
STRICT_CHECKOUT = False

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD_HASH = generate_password_hash("admin-pass")
