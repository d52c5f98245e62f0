from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the project root .env (if present).
PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(PROJECT_ROOT / ".env")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATA_FILE = Path(os.getenv("TASKCAFE_DATA_FILE", str(PROJECT_ROOT / "data" / "todos.json")))
PUBLIC_DIR = Path(os.getenv("TASKCAFE_PUBLIC_DIR", str(PROJECT_ROOT / "public")))
SERIALIZE_WRITES = _env_bool("TASKCAFE_SERIALIZE_WRITES", True)
LOG_LEVEL = os.getenv("TASKCAFE_LOG_LEVEL", "INFO").upper()
COLLATION_LOCALE = os.getenv("TASKCAFE_COLLATION_LOCALE", "ko")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
RELOAD = _env_bool("RELOAD", False)

_cors_origins = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]

# Client-side preferences (theme) for the Python view.
PREFS_FILE = Path(os.getenv("TASKCAFE_PREFS_FILE", str(PROJECT_ROOT / ".local" / "preferences.json")))
API_BASE_URL = os.getenv("TASKCAFE_API_URL", f"http://localhost:{PORT}")
