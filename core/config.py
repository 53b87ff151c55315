"""
Centralized configuration for the course platform.

Settings come from environment variables; entry points load .env.local and
.env with python-dotenv before reading them.
"""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def is_dev_mode() -> bool:
    """Check if running in development mode (--dev flag or DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def get_api_port() -> int:
    """Get API server port from env or default."""
    return int(os.getenv("API_PORT", "8000"))


def get_log_level() -> str:
    """Get the root logging level name (INFO by default)."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def _resolve_dir(env_name: str, default: str) -> Path:
    path = Path(os.getenv(env_name, default))
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def get_content_dir() -> Path:
    """Course lessons root: <CONTENT_DIR>/<module>/<lesson>.mdx."""
    return _resolve_dir("CONTENT_DIR", "content")


def get_library_dir() -> Path:
    """Library lessons root, laid out like the course root."""
    return _resolve_dir("LIBRARY_DIR", "library")


def get_frontend_url() -> str:
    """Get frontend URL based on mode."""
    if is_dev_mode():
        return os.environ.get("FRONTEND_URL", "http://localhost:3000").rstrip("/")
    return os.environ.get("FRONTEND_URL", f"http://localhost:{get_api_port()}").rstrip("/")


def get_allowed_origins() -> list[str]:
    """
    Get list of allowed CORS origins.

    Includes localhost variants for dev and the configured frontend URL.
    """
    hosts = ["localhost", "127.0.0.1"]
    ports = [get_api_port(), 3000, 5173]
    origins = [f"http://{host}:{port}" for host in hosts for port in ports]

    frontend_url = get_frontend_url()
    if frontend_url not in origins:
        origins.append(frontend_url)

    return origins


def check_content_dirs() -> tuple[bool, list[str]]:
    """
    Check that the content roots exist.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    for name, path in (("CONTENT_DIR", get_content_dir()), ("LIBRARY_DIR", get_library_dir())):
        if not path.is_dir():
            warnings.append(f"  ⚠ {name}: {path} does not exist")
    return not warnings, warnings
