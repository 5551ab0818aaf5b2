from dotenv import load_dotenv
import os

load_dotenv()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "ramplo")

APP_TIMEZONE = os.getenv("APP_TIMEZONE", "America/Chicago")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Header set by the identity provider once the caller is verified
AUTH_EMAIL_HEADER = os.getenv("AUTH_EMAIL_HEADER", "X-Auth-Email")

MAX_PROGRAM_WEEKS = int(os.getenv("MAX_PROGRAM_WEEKS", "14"))
DAYS_PER_WEEK = 5

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
TASK_COMPLETION_DELAY_SECONDS = float(
    os.getenv("TASK_COMPLETION_DELAY_SECONDS", "0.3")
)
