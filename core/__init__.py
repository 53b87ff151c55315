"""
Core business logic - platform-agnostic.
Can be used by the web API, scripts, or any other interface.
"""

from .config import (
    is_dev_mode,
    get_api_port,
    get_content_dir,
    get_library_dir,
    get_allowed_origins,
    check_content_dirs,
)

__all__ = [
    "is_dev_mode",
    "get_api_port",
    "get_content_dir",
    "get_library_dir",
    "get_allowed_origins",
    "check_content_dirs",
]
