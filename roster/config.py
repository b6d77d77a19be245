import os
from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Shared bearer credential accepted by the auth gate
API_TOKEN = os.getenv("ROSTER_API_TOKEN", "mysecrettoken123")

LOG_LEVEL = os.getenv("ROSTER_LOG_LEVEL", "INFO").upper()

# Seed Alice and Bob on startup when the roster is empty
SEED_USERS = _get_bool("ROSTER_SEED_USERS", True)

MAX_PAGE_SIZE = int(os.getenv("ROSTER_MAX_PAGE_SIZE", "200"))
# Always within [1, MAX_PAGE_SIZE]
DEFAULT_PAGE_SIZE = max(1, min(int(os.getenv("ROSTER_DEFAULT_PAGE_SIZE", "20")), MAX_PAGE_SIZE))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ROSTER_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

HOST = os.getenv("ROSTER_HOST", "127.0.0.1")
PORT = int(os.getenv("ROSTER_PORT", "8000"))
