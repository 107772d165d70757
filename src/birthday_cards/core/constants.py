"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

PHOTOS_SUBDIR = "photos"
TEMPLATES_SUBDIR = "templates"

EMAIL_TEMPLATE = "emails/birthday.html"
EMAIL_SUBJECT = "\U0001F389 Happy Birthday {name}!"

# Extra seconds granted on top of the SMTP timeout before a run stops waiting
DISPATCH_WAIT_MARGIN_SECONDS = 5
