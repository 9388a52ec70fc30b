"""
Configuration — loads from .env, provides defaults.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Open-Meteo endpoints (free, no API key required)
GEO_URL = os.getenv("GEO_URL", "https://geocoding-api.open-meteo.com/v1/search")
WEATHER_URL = os.getenv("WEATHER_URL", "https://api.open-meteo.com/v1/forecast")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))  # seconds, per request
# Cap on one whole lookup; HTTP_TIMEOUT only bounds each connect or read
LOOKUP_DEADLINE = float(os.getenv("LOOKUP_DEADLINE", "30"))  # seconds, per lookup

# Looked up once at startup when set
DEFAULT_CITY = os.getenv("DEFAULT_CITY", "").strip()

# Telegram (optional — the web widget runs on its own without a token)
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
OWNER_CHAT_ID = int(os.environ.get("OWNER_CHAT_ID", "0"))

# Web widget
DASHBOARD_HOST = os.getenv("DASHBOARD_HOST", "127.0.0.1")
DASHBOARD_PORT = int(os.getenv("DASHBOARD_PORT", "8080"))
DASHBOARD_SECRET = os.getenv("DASHBOARD_SECRET", "change-me-in-production")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
