import os
from pathlib import Path
from dotenv import load_dotenv

# --- Core Path Configuration ---
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from a .env file at the project root
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

# --- Celery ---
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")

# --- API ---
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# --- Scheduling ---
# Used to stamp schedule metadata when the constraints carry no timezone
DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "UTC")
