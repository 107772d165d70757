import os

DATA_DIR = os.getenv("DATA_DIR", "data")
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "public")

SMTP_HOST = os.getenv("SMTP_HOST", "smtp.office365.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER = os.getenv("SMTP_USER")
SMTP_PASS = os.getenv("SMTP_PASS")

# Prefix for photo/template links embedded in emails
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")

# Bearer token expected by the scheduled birthday check
CRON_SECRET = os.getenv("CRON_SECRET", "dev-secret")

MAIL_TIMEOUT_SECONDS = float(os.getenv("MAIL_TIMEOUT_SECONDS", "30"))
MAIL_MAX_WORKERS = int(os.getenv("MAIL_MAX_WORKERS", "8"))

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
