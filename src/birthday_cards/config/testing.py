DATA_DIR = "data-test"
PUBLIC_DIR = "public-test"

SMTP_HOST = "localhost"
SMTP_PORT = 1025
SMTP_USER = None
SMTP_PASS = None

PUBLIC_BASE_URL = "http://testserver"

CRON_SECRET = "test-secret"

MAIL_TIMEOUT_SECONDS = 5.0
MAIL_MAX_WORKERS = 2

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
