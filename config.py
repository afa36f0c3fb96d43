"""Global configuration values."""

import os

# Brevo transactional email API
BREVO_API_KEY = os.environ.get("BREVO_API_KEY", "")
BREVO_API_URL = os.environ.get("BREVO_API_URL", "https://api.brevo.com/v3").rstrip("/")

# Template used for the recommendation email
BREVO_RECOMMENDATION_TEMPLATE_ID = int(os.environ.get("BREVO_RECOMMENDATION_TEMPLATE_ID", "0") or 0)

# Contact list that drives the follow-up automation
BREVO_FOLLOW_UP_LIST_ID = int(os.environ.get("BREVO_FOLLOW_UP_LIST_ID", "2") or 2)

# Seconds; unset means requests waits indefinitely
BREVO_TIMEOUT = float(os.environ["BREVO_TIMEOUT"]) if os.environ.get("BREVO_TIMEOUT") else None

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
