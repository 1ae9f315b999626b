# backend/planner/config.py
# Environment-driven settings, read once at import

import os
from dotenv import load_dotenv

load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "ru").lower()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# TTF with Cyrillic glyphs for PDF output; built-in Helvetica otherwise
PDF_FONT_PATH = os.getenv("PDF_FONT_PATH")
