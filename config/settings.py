"""Configuration settings - read from environment with safe defaults."""
import os
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

# MongoDB
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "enrollment_db")
ENROLLMENT_COLLECTION = os.getenv("ENROLLMENT_COLLECTION", "NewStudents")
MONGO_TIMEOUT_MS = safe_int_env("MONGO_TIMEOUT_MS", "5000")

# Dashboard
RECENT_LIMIT = safe_int_env("RECENT_LIMIT", "5")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"))
