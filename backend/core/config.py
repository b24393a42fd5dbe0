from dotenv import load_dotenv
import os

load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Insights Dashboard API")

API_PREFIX = os.getenv("API_PREFIX", "/api")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = os.getenv("LOG_FORMAT", "console").lower()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")
    if origin.strip()
]

# Fixed clock the demo dataset was generated against.
DEMO_NOW = os.getenv("DEMO_NOW", "2025-09-04T12:00:00Z")
