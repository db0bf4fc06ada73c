from pathlib import Path
from dotenv import load_dotenv, find_dotenv
import os

dotenv_path = find_dotenv(filename=".env", usecwd=True)
if not dotenv_path:
    dotenv_path = str((Path(__file__).parent.parent / ".env").resolve())
load_dotenv(dotenv_path=dotenv_path)

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

# Presentation layer -> proxy endpoint
SERVICE_URL = os.getenv("LEAKCHECK_SERVICE_URL", "http://127.0.0.1:8000").rstrip("/")
ANON_KEY = os.getenv("LEAKCHECK_ANON_KEY", "").strip()
CHECK_PATH = "/check-email-breach"

# Proxy endpoint -> provider
HIBP_API_URL = os.getenv("HIBP_API_URL", "https://haveibeenpwned.com/api/v3").rstrip("/")
HIBP_API_KEY = os.getenv("HIBP_API_KEY", "").strip()
HIBP_SITE_URL = "https://haveibeenpwned.com"
USER_AGENT = "PasswordLeakChecker"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}


def check_endpoint_url() -> str:
    return f"{SERVICE_URL}{CHECK_PATH}"
