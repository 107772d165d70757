import os

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/birthday-cards/data")
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "/var/lib/birthday-cards/public")

SMTP_HOST = os.getenv("SMTP_HOST", "smtp.office365.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER = os.getenv("SMTP_USER")
SMTP_PASS = os.getenv("SMTP_PASS")

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")

# No usable default: an unset secret rejects every trigger
CRON_SECRET = os.getenv("CRON_SECRET")

MAIL_TIMEOUT_SECONDS = float(os.getenv("MAIL_TIMEOUT_SECONDS", "30"))
MAIL_MAX_WORKERS = int(os.getenv("MAIL_MAX_WORKERS", "8"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
